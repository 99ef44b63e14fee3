"""BDD tests for account registration."""

import pytest
from protean.utils.globals import current_domain
from pytest_bdd import given, parsers, scenarios, then, when
from storefront.errors import ConflictError
from storefront.identity.security import hash_password, verify_password
from storefront.identity.user.registration import RegisterUser
from storefront.identity.user.user import User

scenarios("features/registration.feature")


@pytest.fixture()
def error():
    return {"exc": None}


def _register(username, email, password):
    return current_domain.process(
        RegisterUser(username=username, email=email, password_hash=hash_password(password)),
        asynchronous=False,
    )


@given(parsers.cfparse('"{username}" registered with email "{email}" and password "{password}"'))
def registered(username, email, password):
    _register(username, email, password)


@when(parsers.cfparse('"{username}" registers with email "{email}" and password "{password}"'))
def registers(username, email, password, error):
    try:
        _register(username, email, password)
    except ConflictError as exc:
        error["exc"] = exc


@then(parsers.cfparse('an account exists for "{email}"'))
def account_exists(email):
    assert current_domain.repository_for(User).by_email(email) is not None


@then(parsers.cfparse('signing in as "{email}" with "{password}" succeeds'))
def sign_in_succeeds(email, password):
    user = current_domain.repository_for(User).by_email(email)
    assert verify_password(password, user.password)


@then(parsers.cfparse('signing in as "{email}" with "{password}" fails'))
def sign_in_fails(email, password):
    user = current_domain.repository_for(User).by_email(email)
    assert not verify_password(password, user.password)


@then(parsers.cfparse('the registration is refused with "{message}"'))
def refused(error, message):
    assert isinstance(error["exc"], ConflictError)
    assert error["exc"].message == message


@then(parsers.cfparse('there is no account named "{username}"'))
def no_account(username):
    assert current_domain.repository_for(User).by_username(username) is None
