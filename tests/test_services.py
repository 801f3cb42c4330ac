import pytest

from jfcli.commands.models import Command, Context
from jfcli.models import ServiceNotAvailableError, UsageError
from jfcli.services import SERVICES_GROUP, delegate, load_service_handler


@pytest.fixture
def ctx(make_app, scenario_registry):
    return Context(make_app(scenario_registry), Command(name="ping"), ["a"], {})


def test_handler_found(mocker):
    handler = mocker.Mock(return_value=0)
    entry_point = mocker.Mock(value="acme.services:ping")
    entry_point.load.return_value = handler
    entry_points = mocker.patch("jfcli.services.entry_points", return_value=[entry_point])
    assert load_service_handler("rt.ping") is handler
    entry_points.assert_called_once_with(group=SERVICES_GROUP, name="rt.ping")


def test_handler_missing(mocker):
    mocker.patch("jfcli.services.entry_points", return_value=[])
    with pytest.raises(ServiceNotAvailableError, match="'rt.ping' is handled by an external service client") as excinfo:
        load_service_handler("rt.ping")
    assert excinfo.value.operation == "rt.ping"


def test_delegate(mocker, ctx):
    handler = mocker.Mock(return_value=3)
    mocker.patch("jfcli.services.load_service_handler", return_value=handler)
    action = delegate("rt.ping", lambda c: {"target": c.args[0]})
    assert action.__name__ == "delegate_rt_ping"
    assert action(ctx) == 3
    handler.assert_called_once_with(ctx, target="a")


def test_delegate_without_prepare(mocker, ctx):
    handler = mocker.Mock(return_value=None)
    mocker.patch("jfcli.services.load_service_handler", return_value=handler)
    assert delegate("build-clean")(ctx) is None
    handler.assert_called_once_with(ctx)


def test_prepare_runs_first(mocker, ctx):
    load = mocker.patch("jfcli.services.load_service_handler")

    def prepare(_):
        raise UsageError("bad arguments")

    with pytest.raises(UsageError):
        delegate("rt.ping", prepare)(ctx)
    load.assert_not_called()


def test_missing_service_exit_code(mocker, settings, make_app):
    from jfcli.main import create_registry

    mocker.patch("jfcli.services.entry_points", return_value=[])
    app = make_app(create_registry(settings))
    assert app.run(["rt", "ping"]) == 1
