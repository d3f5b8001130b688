import pytest

from cloudinfo.configs import ConfigError, JaegerConfig, RedisConfig


@pytest.mark.parametrize(
    "message, config",
    [
        ("redis host is required", RedisConfig(enabled=True, port=6379)),
        ("redis port is required", RedisConfig(enabled=True, host="127.0.0.1")),
    ],
)
def test_redis_config_validate(message, config):
    with pytest.raises(ConfigError) as excinfo:
        config.validate()
    assert str(excinfo.value) == message


def test_redis_config_server():
    config = RedisConfig(enabled=True, host="127.0.0.1", port=6379)
    assert config.server() == "127.0.0.1:6379"


def test_jaeger_config_validate():
    with pytest.raises(ConfigError) as excinfo:
        JaegerConfig().validate()
    assert str(excinfo.value) == "either collector endpoint or agent endpoint must be configured"


def test_config_error_is_value_error():
    with pytest.raises(ValueError):
        RedisConfig(enabled=True).validate()