import pytest

from valhalla.config import (
    ChannelConfig,
    ConfigError,
    DbConfig,
    channel_config_from_file,
    load_config,
    login_config_from_file,
    world_config_from_file,
)

SAMPLE = """
[database]
address = "127.0.0.1"
port = "3306"
user = "root"
password = "password"
database = "maplestory"

[login]
clientListenAddress = "0.0.0.0"
clientListenPort = "8484"
serverListenAddress = "0.0.0.0"
serverListenPort = "8485"
packetQueueSize = 512
latency = 0
jitter = 0

[world]
message = "hello"
ribbon = 2
loginAddress = "127.0.0.1"
loginPort = "8485"
listenAddress = "0.0.0.0"
listenPort = "8584"
packetQueueSize = 512

[channel]
worldAddress = "127.0.0.1"
worldPort = "8584"
listenAddress = "0.0.0.0"
clientConnectionAddress = "127.0.0.1"
listenPort = "8685"
packetQueueSize = 512
maxPop = 250
latency = 10
jitter = 5
"""


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(SAMPLE)
    return path


def test_login_section(config_path):
    login, db = login_config_from_file(config_path)
    assert login.client_listen_port == "8484"
    assert login.server_listen_port == "8485"
    assert login.packet_queue_size == 512
    assert db.address == "127.0.0.1"
    assert db.database == "maplestory"


def test_world_section(config_path):
    world, db = world_config_from_file(config_path)
    assert world.message == "hello"
    assert world.ribbon == 2
    assert world.listen_port == "8584"
    assert db.user == "root"


def test_channel_section(config_path):
    channel, _ = channel_config_from_file(config_path)
    assert channel.max_pop == 250
    assert channel.latency == 10
    assert channel.jitter == 5
    assert channel.client_connection_address == "127.0.0.1"


def test_missing_sections_use_defaults(tmp_path):
    path = tmp_path / "empty.toml"
    path.write_text("")
    config = load_config(path)
    assert config.database == DbConfig()
    assert config.channel == ChannelConfig()


def test_keys_match_case_insensitively(tmp_path):
    path = tmp_path / "c.toml"
    path.write_text('[Channel]\nMaxPop = 7\nListenPort = "1"\n')
    channel, _ = channel_config_from_file(path)
    assert channel.max_pop == 7
    assert channel.listen_port == "1"


def test_type_mismatch_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('[login]\npacketQueueSize = "many"\n')
    with pytest.raises(ConfigError):
        load_config(path)


def test_byte_out_of_range_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[world]\nribbon = 300\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[login\n")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.toml")