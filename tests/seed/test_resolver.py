from app.config import Settings
from app.users.models import UserRole
from scripts.seed_demo_users import DEFAULTS, from_env, resolve_demo_accounts


def test_defaults_without_overrides(make_settings):
    admin, team_leader, hr = resolve_demo_accounts(make_settings())

    assert (admin.name, admin.email, admin.password, admin.role) == (
        "Admin",
        "admin@leadmanagement.com",
        "admin123",
        UserRole.ADMIN,
    )
    assert team_leader.email == "rajesh.kumar@leadmanagement.com"
    assert team_leader.role == UserRole.TEAM_LEADER
    assert hr.email == "neha.singh@leadmanagement.com"
    assert hr.role == UserRole.HR


def test_single_override_keeps_other_defaults(make_settings):
    admin, team_leader, hr = resolve_demo_accounts(make_settings(ADMIN_EMAIL="x@y.com"))

    assert admin.email == "x@y.com"
    assert admin.name == "Admin"
    assert admin.password == "admin123"
    assert team_leader == DEFAULTS["TEAM_LEADER"]
    assert hr == DEFAULTS["HR"]


def test_empty_override_falls_back_to_default(make_settings):
    hr = from_env("HR", DEFAULTS["HR"], make_settings(HR_NAME="", HR_PASSWORD="secret"))

    assert hr.name == "Neha Singh"
    assert hr.password == "secret"


def test_role_comes_from_slot_not_environment(make_settings, monkeypatch):
    monkeypatch.setenv("HR_ROLE", "admin")
    _, _, hr = resolve_demo_accounts(make_settings())
    assert hr.role == UserRole.HR


def test_overrides_read_from_environment(make_settings, monkeypatch):
    monkeypatch.setenv("TEAM_LEADER_NAME", "Priya Patel")
    # make_settings passes None explicitly, so build without that key
    config = Settings(_env_file=None, MONGODB_URI="mongodb://localhost:27017")
    _, team_leader, _ = resolve_demo_accounts(config)
    assert team_leader.name == "Priya Patel"
