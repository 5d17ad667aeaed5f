"""Tests for constructor option layering and request defaults."""

import pytest

from octokit_core.options import build_request_defaults, merge_defaults, resolve_options
from octokit_core.user_agent import USER_AGENT_TRAIL


async def trigger(method, options):
    return await method(options)


class TestMergeDefaults:
    """Test a single class defaults layer."""

    @pytest.mark.unit
    def test_options_override_defaults(self):
        """Instance options win key by key."""
        merged = merge_defaults(
            {"base_url": "https://ghe.example.com/api/v3", "time_zone": "UTC"},
            {"time_zone": "Europe/Amsterdam"},
        )

        assert merged == {"base_url": "https://ghe.example.com/api/v3", "time_zone": "Europe/Amsterdam"}

    @pytest.mark.unit
    def test_user_agents_are_joined(self):
        """Both user agents are kept, instance value first."""
        merged = merge_defaults({"user_agent": "base/1.0"}, {"user_agent": "app/2.0"})

        assert merged["user_agent"] == "app/2.0 base/1.0"

    @pytest.mark.unit
    def test_single_user_agent_is_kept(self):
        """A user agent on only one side is used as is."""
        assert merge_defaults({"user_agent": "base/1.0"}, {})["user_agent"] == "base/1.0"
        assert merge_defaults({}, {"user_agent": "app/2.0"})["user_agent"] == "app/2.0"

    @pytest.mark.unit
    def test_callable_layer_replaces_options(self):
        """A callable receives the options and its result is used verbatim."""
        received = []

        def transform(options):
            received.append(options)
            return {"base_url": "https://transformed.example.com"}

        merged = merge_defaults(transform, {"user_agent": "app/2.0"})

        assert received == [{"user_agent": "app/2.0"}]
        assert merged == {"base_url": "https://transformed.example.com"}

    @pytest.mark.unit
    def test_callable_layer_returning_none(self):
        """A callable that returns nothing yields empty options."""
        assert merge_defaults(lambda options: None, {"user_agent": "app/2.0"}) == {}

    @pytest.mark.unit
    def test_inputs_are_not_mutated(self):
        """Neither the defaults nor the options are modified."""
        defaults = {"user_agent": "base/1.0"}
        options = {"user_agent": "app/2.0"}

        merge_defaults(defaults, options)

        assert defaults == {"user_agent": "base/1.0"}
        assert options == {"user_agent": "app/2.0"}


class TestResolveOptions:
    """Test stacking of several layers."""

    @pytest.mark.unit
    def test_newest_layer_applied_first(self):
        """The most recently added layer sees the instance options first."""
        layers = [{"user_agent": "oldest"}, {"user_agent": "newest"}]

        resolved = resolve_options(layers, {"user_agent": "instance"})

        assert resolved["user_agent"] == "instance newest oldest"

    @pytest.mark.unit
    def test_callable_layer_output_feeds_older_layers(self):
        """Older mapping layers still merge under a callable layer's result."""
        layers = [{"time_zone": "UTC"}, lambda options: {"base_url": options["base_url"] + "/api/v3"}]

        resolved = resolve_options(layers, {"base_url": "https://ghe.example.com"})

        assert resolved == {"time_zone": "UTC", "base_url": "https://ghe.example.com/api/v3"}

    @pytest.mark.unit
    def test_no_layers_returns_copy(self):
        """Without layers the options are copied unchanged."""
        options = {"auth": "secret123"}

        resolved = resolve_options((), options)

        assert resolved == options
        assert resolved is not options


class TestBuildRequestDefaults:
    """Test per-instance request defaults."""

    @pytest.mark.unit
    def test_library_defaults(self):
        """Without options the API root and library user agent are used."""
        defaults = build_request_defaults({}, trigger)

        assert defaults == {
            "base_url": "https://api.github.com",
            "headers": {"user-agent": USER_AGENT_TRAIL},
            "request": {"hook": trigger},
            "media_type": {"previews": [], "format": ""},
        }

    @pytest.mark.unit
    def test_all_options_applied(self):
        """Recognized options populate the matching defaults."""
        defaults = build_request_defaults(
            {
                "base_url": "https://ghe.example.com/api/v3",
                "user_agent": "app/2.0",
                "time_zone": "Europe/Amsterdam",
                "previews": ("package-deletes",),
                "request": {"timeout": 10},
            },
            trigger,
        )

        assert defaults["base_url"] == "https://ghe.example.com/api/v3"
        assert defaults["headers"] == {
            "user-agent": f"app/2.0 {USER_AGENT_TRAIL}",
            "time-zone": "Europe/Amsterdam",
        }
        assert defaults["media_type"]["previews"] == ["package-deletes"]
        assert defaults["request"] == {"timeout": 10, "hook": trigger}

    @pytest.mark.unit
    def test_request_option_not_mutated(self):
        """The caller's request options do not receive the hook."""
        request_options = {"timeout": 10}

        build_request_defaults({"request": request_options}, trigger)

        assert request_options == {"timeout": 10}
