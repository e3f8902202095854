import pytest

from .. import create_app
from ..extensions import db
from ..forms.user_forms import RegisterForm, PASSWORD_RULE_MESSAGE
from ..models.user import User
from ..repositories import user_repo


@pytest.fixture(scope="session")
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.drop_all()


@pytest.fixture(autouse=True)
def _ctx(app):
    with app.app_context():
        yield
        User.query.delete()
        db.session.commit()


def _validate(app, data):
    with app.test_request_context("/user/register", method="POST", data=data):
        form = RegisterForm()
        valid = form.validate()
        return valid, form


def test_valid_form(app):
    valid, form = _validate(app, {
        "first_name": "Ada",
        "last_name": "Lovelace",
        "email_address": "Ada@Example.com",
        "password": "Secr3t!pass",
        "confirm_password": "Secr3t!pass",
    })
    assert valid is True
    assert form.errors_array() == []
    assert form.email_address.data == "ada@example.com"


def test_errors_follow_field_order(app):
    valid, form = _validate(app, {
        "first_name": "",
        "last_name": "x" * 51,
        "email_address": "",
        "password": "weak",
        "confirm_password": "other",
    })
    assert valid is False
    assert form.errors_array() == [
        "Please enter a first name",
        "Last name must be shorter than 50 characters",
        "Please enter an email address",
        "Please provide a valid email address",
        PASSWORD_RULE_MESSAGE,
        "Password confirmation does not match",
    ]


def test_missing_value_does_not_stop_the_chain(app):
    valid, form = _validate(app, {"password": "", "confirm_password": ""})
    assert valid is False
    assert form.password.errors == ["Please enter a password", PASSWORD_RULE_MESSAGE]
    assert form.confirm_password.errors == ["Please confirm your password"]


def test_whitespace_only_counts_as_present(app):
    valid, form = _validate(app, {"first_name": "   ", "email_address": "   "})
    assert valid is False
    assert form.first_name.errors == []
    assert form.email_address.errors == ["Please provide a valid email address"]


def test_length_checked_on_submitted_email(app):
    # 规范化后只剩 ada@gmail.com，但提交的原始值超长
    raw = "ada+" + "x" * 250 + "@gmail.com"
    valid, form = _validate(app, {"email_address": raw})
    assert valid is False
    assert form.email_address.errors == ["Email must be shorter than 255 characters"]
    assert form.email_address.data == "ada@gmail.com"


def test_tag_only_mailbox_is_invalid(app):
    valid, form = _validate(app, {"email_address": "+Tag@GMail.com"})
    assert valid is False
    assert form.email_address.errors == ["Please provide a valid email address"]


def test_every_failing_check_is_reported(app):
    user_repo.create_user("Ada", "Lovelace", "x" * 250 + "@example.com", "hash")
    valid, form = _validate(app, {"email_address": "x" * 250 + "@example.com"})
    assert valid is False
    assert form.email_address.errors == [
        "Email must be shorter than 255 characters",
        "Please provide a valid email address",
        "E-mail already in use",
    ]


def test_existing_email_after_normalization(app):
    user_repo.create_user("Ada", "Lovelace", "adalovelace@gmail.com", "hash")
    valid, form = _validate(app, {"email_address": "Ada.Lovelace+x@googlemail.com"})
    assert valid is False
    assert "E-mail already in use" in form.email_address.errors
