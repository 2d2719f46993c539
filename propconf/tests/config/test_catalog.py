"""
Tests for the sidecar property catalog and the Properties holder.
"""

from datetime import timedelta

import pytest

from propconf.config import catalog
from propconf.config.catalog import (
    ALL_PROPERTIES,
    API_PROTOCOL,
    API_TOKEN,
    GRPC_PORT,
    HTTP_CLIENT_READ_TIMEOUT,
    HTTP_PORT,
    MAX_RETRIES,
    SIDECAR_IP,
    STRING_CHARSET,
    TIMEOUT,
    ApiProtocol,
    Properties,
)
from propconf.config.property import Tier
from propconf.core.sources import MappingPropertySource, SystemProperties


@pytest.fixture
def no_dapr_env(monkeypatch):
    """Unset every catalog environment variable."""
    for prop in ALL_PROPERTIES:
        monkeypatch.delenv(prop.env_name, raising=False)
    return monkeypatch


class TestCatalog:
    """Tests for the well-known properties."""

    def test_defaults(self, no_dapr_env):
        props = Properties()
        assert props.value(SIDECAR_IP) == "127.0.0.1"
        assert props.value(HTTP_PORT) == 3500
        assert props.value(GRPC_PORT) == 50001
        assert props.value(API_TOKEN) is None
        assert props.value(STRING_CHARSET) == "utf-8"
        assert props.value(MAX_RETRIES) == 0
        assert props.value(TIMEOUT) == timedelta(0)
        assert props.value(HTTP_CLIENT_READ_TIMEOUT) == timedelta(seconds=60)
        assert props.value(API_PROTOCOL) is ApiProtocol.GRPC

    def test_names_are_unique(self):
        names = [p.name for p in ALL_PROPERTIES]
        env_names = [p.env_name for p in ALL_PROPERTIES]
        assert len(set(names)) == len(names)
        assert len(set(env_names)) == len(env_names)

    def test_all_exported_properties_listed(self):
        for export in catalog.__all__:
            value = getattr(catalog, export)
            if isinstance(value, type(HTTP_PORT)):
                assert value in ALL_PROPERTIES

    def test_environment(self, no_dapr_env):
        no_dapr_env.setenv("DAPR_HTTP_PORT", "3600")
        no_dapr_env.setenv("DAPR_API_PROTOCOL", "http")
        assert HTTP_PORT.get() == 3600
        assert API_PROTOCOL.get() is ApiProtocol.HTTP

    def test_system_property(self, no_dapr_env):
        SystemProperties.set("dapr.api.timeoutMilliseconds", "1500")
        assert TIMEOUT.get() == timedelta(milliseconds=1500)

    def test_oversized_timeout_env_uses_default(self):
        source = MappingPropertySource(
            environ={"DAPR_API_TIMEOUT_MILLISECONDS": "100000000000000000000"}
        )
        resolution = TIMEOUT.resolve(source=source)
        assert resolution.value == timedelta(0)
        assert resolution.rejected == (Tier.ENVIRONMENT,)

    def test_oversized_read_timeout_override_uses_default(self, no_dapr_env):
        assert HTTP_CLIENT_READ_TIMEOUT.get("99999999999999") == timedelta(seconds=60)


class TestProperties:
    """Tests for the override holder."""

    def test_override_by_name(self, no_dapr_env):
        props = Properties({"dapr.http.port": "4000"})
        assert props.value(HTTP_PORT) == 4000
        assert props.value(GRPC_PORT) == 50001

    def test_override_by_property(self, no_dapr_env):
        props = Properties({MAX_RETRIES: "3"})
        assert props.value(MAX_RETRIES) == 3
        assert props.overrides == {"dapr.api.maxRetries": "3"}

    def test_none_overrides_ignored(self):
        props = Properties({HTTP_PORT: None})
        assert props.overrides == {}

    def test_non_string_override_rejected(self):
        with pytest.raises(TypeError):
            Properties({HTTP_PORT: 4000})

    def test_overrides_copy(self):
        props = Properties({HTTP_PORT: "4000"})
        props.overrides["dapr.http.port"] = "1"
        assert props.overrides == {"dapr.http.port": "4000"}

    def test_override_beats_process_state(self, no_dapr_env):
        SystemProperties.set("dapr.http.port", "4100")
        no_dapr_env.setenv("DAPR_HTTP_PORT", "4200")
        assert Properties({HTTP_PORT: "4000"}).value(HTTP_PORT) == 4000
        assert Properties().value(HTTP_PORT) == 4100

    def test_invalid_override_falls_through(self, no_dapr_env):
        no_dapr_env.setenv("DAPR_HTTP_PORT", "4200")
        resolution = Properties({HTTP_PORT: "nope"}).resolve(HTTP_PORT)
        assert resolution.value == 4200
        assert resolution.tier == Tier.ENVIRONMENT
        assert resolution.rejected == (Tier.OVERRIDE,)

    def test_holder_source(self):
        source = MappingPropertySource(
            properties={"dapr.sidecar.ip": "10.0.0.5"},
            environ={"DAPR_GRPC_PORT": "50002"},
        )
        props = Properties(source=source)
        assert props.value(SIDECAR_IP) == "10.0.0.5"
        assert props.value(GRPC_PORT) == 50002

    def test_values(self):
        props = Properties({HTTP_PORT: "4000"}, source=MappingPropertySource())
        values = props.values()
        assert set(values) == {p.name for p in ALL_PROPERTIES}
        assert values["dapr.http.port"] == 4000
        assert values["dapr.grpc.port"] == 50001

    def test_values_subset(self):
        props = Properties(source=MappingPropertySource())
        assert props.values([HTTP_PORT]) == {"dapr.http.port": 3500}
