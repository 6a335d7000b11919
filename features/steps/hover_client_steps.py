"""
Step definitions for Hover client login gating tests.
"""

from behave import given, when, then

from hover_dns_manager.core.client import HoverClient
from hover_dns_manager.core.exceptions import HoverError


@given("the Hover login succeeds")
def step_impl(context):
    """Keep the default successful login response."""
    context.session.post.return_value = context.make_response(payload={"succeeded": True})


@given('the Hover login fails with status {status:d} and error "{error}"')
def step_impl(context, status, error):
    """Make the login response fail."""
    context.session.post.return_value = context.make_response(status, {"error": error})


@given('the domain "{domain}" has an "{record_type}" record "{name}" with id "{record_id}"')
def step_impl(context, domain, record_type, name, record_id):
    """Serve a DNS record for the domain."""
    context.session.request.return_value = context.make_response(
        payload={
            "dns": [{"id": record_id, "name": name, "type": record_type}],
            "succeeded": True,
        }
    )


@when('I create a client for "{username}" with password "{password}"')
def step_impl(context, username, password):
    """Create the client, recording a construction error if any."""
    context.client = None
    try:
        context.client = HoverClient(username, password, session=context.session)
    except HoverError as e:
        context.error = e


@when('I create a client without a username and with password "{password}"')
def step_impl(context, password):
    """Create the client with an empty username."""
    context.client = None
    try:
        context.client = HoverClient("", password, session=context.session)
    except HoverError as e:
        context.error = e


def _call(context, operation):
    try:
        context.result = operation()
    except HoverError as e:
        context.error = e


@when("I list all domains")
def step_impl(context):
    """List the domains of the account."""
    _call(context, context.client.get_all_domains)


@when("I list all DNS records")
def step_impl(context):
    """List the DNS records of the account."""
    _call(context, context.client.get_all_dns)


@when('I create an MX record "{name}" on "{domain}" with priority "{priority}" and address "{ip}"')
def step_impl(context, name, domain, priority, ip):
    """Create an MX record."""
    _call(context, lambda: context.client.create_mx_record(domain, name, priority, ip))


@when('I look up "{name}" records of type "{record_type}" on "{domain}"')
def step_impl(context, name, record_type, domain):
    """Look up record identifiers."""
    _call(
        context,
        lambda: context.client.get_subdomain_identifiers(domain, name, record_type),
    )


@then("the login should have been sent {count:d} time")
@then("the login should have been sent {count:d} times")
def step_impl(context, count):
    """Check how many login requests were sent."""
    assert context.session.post.call_count == count, (
        f"Expected {count} logins, got {context.session.post.call_count}"
    )


@then("{count:d} API requests should have been sent")
def step_impl(context, count):
    """Check how many API requests were sent."""
    assert context.session.request.call_count == count, (
        f"Expected {count} requests, got {context.session.request.call_count}"
    )


@then('the call should fail with "{message}"')
def step_impl(context, message):
    """Check the error raised by the last call."""
    assert context.error is not None, "Expected an error but the call succeeded"
    assert str(context.error) == message, f"Unexpected error: {context.error}"


@then('the last request body content should be "{content}"')
def step_impl(context, content):
    """Check the content field of the last request body."""
    body = context.session.request.call_args.kwargs["json"]
    assert body["content"] == content, f"Unexpected content: {body['content']}"


@then('the identifiers should be "{identifiers}"')
def step_impl(context, identifiers):
    """Check the identifiers returned by the lookup."""
    assert context.error is None, f"Lookup failed: {context.error}"
    assert context.result == identifiers.split(","), f"Unexpected result: {context.result}"
