"""Tests for choosing and binding an instance's authentication strategy."""

import pytest

from octokit_core import Octokit
from octokit_core.auth import AuthStrategyError, TokenAuth, Unauthenticated
from octokit_core.testing import RecordingTransport


class CustomStrategy:
    """Strategy that records its options and adds a custom header."""

    def __init__(self, options):
        self.options = options

    async def __call__(self, *args, **kwargs):
        return {"type": "custom", "args": args}

    async def hook(self, next_, options):
        headers = {**options["headers"], "authorization": f"custom {self.options['secret']}"}
        return await next_({**options, "headers": headers})


class TestUnauthenticated:
    """Neither auth nor auth_strategy."""

    @pytest.mark.unit
    async def test_auth_reports_unauthenticated(self):
        """auth() resolves to the unauthenticated descriptor."""
        octokit = Octokit()

        assert isinstance(octokit.auth, Unauthenticated)
        assert await octokit.auth() == {"type": "unauthenticated"}

    @pytest.mark.unit
    async def test_no_hook_registered(self, transport):
        """Requests go out without an authorization header."""
        octokit = Octokit(request={"transport": transport})

        await octokit.request("GET /")

        assert octokit.hook.registered("request").wrap == []
        assert "authorization" not in transport.last_request.headers


class TestTokenAuth:
    """Only auth."""

    @pytest.mark.unit
    async def test_token_sent_as_authorization(self, transport):
        """The token strategy adds the authorization header."""
        octokit = Octokit(auth="secret123", request={"transport": transport})

        await octokit.request("GET /user")

        assert isinstance(octokit.auth, TokenAuth)
        assert transport.last_request.headers["authorization"] == "token secret123"

    @pytest.mark.unit
    async def test_auth_delegates_to_strategy(self):
        """auth() returns the token descriptor."""
        octokit = Octokit(auth="secret123")

        assert await octokit.auth() == {"type": "token", "token": "secret123", "token_type": "oauth"}

    @pytest.mark.unit
    def test_hook_registered_once_as_wrap(self):
        """The token hook is the only interceptor after construction."""
        octokit = Octokit(auth="secret123")

        phase = octokit.hook.registered("request")
        assert len(phase.wrap) == 1
        assert phase.before == phase.after == phase.error == []


class TestAuthStrategy:
    """auth_strategy supplied."""

    @pytest.mark.unit
    async def test_strategy_receives_instance_and_options(self, transport):
        """The factory gets request, log, the instance, other options and auth sub-options."""
        created = []

        def factory(options):
            strategy = CustomStrategy(options)
            created.append(strategy)
            return strategy

        octokit = Octokit(
            auth_strategy=factory,
            auth={"secret": "s3cr3t"},
            user_agent="app/1.0",
            request={"transport": transport},
        )

        options = created[0].options
        assert options["request"] is octokit.request
        assert options["log"] is octokit.log
        assert options["octokit"] is octokit
        assert options["secret"] == "s3cr3t"
        assert "auth_strategy" not in options["octokit_options"]
        assert options["octokit_options"]["user_agent"] == "app/1.0"
        assert options["octokit_options"]["auth"] == {"secret": "s3cr3t"}

        await octokit.request("GET /user")

        assert octokit.auth is created[0]
        assert transport.last_request.headers["authorization"] == "custom s3cr3t"
        assert await octokit.auth("installation") == {"type": "custom", "args": ("installation",)}

    @pytest.mark.unit
    def test_strategy_without_auth_options(self):
        """auth_strategy works without auth sub-options."""
        received = []

        def factory(options):
            received.append(options)
            return CustomStrategy({"secret": "none"})

        Octokit(auth_strategy=factory)

        assert set(received[0]) == {"request", "log", "octokit", "octokit_options"}

    @pytest.mark.unit
    def test_factory_exception_propagates(self):
        """Errors raised by the factory reach the constructor's caller unchanged."""

        def factory(options):
            raise RuntimeError("bad credentials")

        with pytest.raises(RuntimeError, match="bad credentials"):
            Octokit(auth_strategy=factory)

    @pytest.mark.unit
    def test_strategy_without_hook_rejected(self):
        """A strategy missing hook fails construction."""

        async def no_hook(*args):
            return {"type": "custom"}

        with pytest.raises(AuthStrategyError, match="hook"):
            Octokit(auth_strategy=lambda options: no_hook)

    @pytest.mark.unit
    def test_non_callable_strategy_rejected(self):
        """A strategy that cannot be awaited as auth() fails construction."""

        class HookOnly:
            async def hook(self, next_, options):
                return await next_(options)

        with pytest.raises(AuthStrategyError, match="not callable"):
            Octokit(auth_strategy=lambda options: HookOnly())

    @pytest.mark.unit
    def test_plugins_not_run_when_auth_fails(self):
        """Binding happens before plugins, so a failure skips them."""
        calls = []
        MyOctokit = Octokit.plugin(lambda octokit, options: calls.append("plugin"))

        with pytest.raises(AuthStrategyError):
            MyOctokit(auth_strategy=lambda options: None)

        assert calls == []

    @pytest.mark.unit
    async def test_strategy_hook_runs_outside_plugin_wraps(self, transport):
        """Plugin wraps registered later see the credentials already applied."""
        seen = []

        def observe(octokit, options):
            async def wrap(next_, request_options):
                seen.append(request_options["headers"].get("authorization"))
                return await next_(request_options)

            octokit.hook.wrap("request", wrap)

        MyOctokit = Octokit.plugin(observe)
        octokit = MyOctokit(auth="secret123", request={"transport": transport})

        await octokit.request("GET /")

        assert seen == ["token secret123"]
