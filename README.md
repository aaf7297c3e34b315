# valhalla

Building blocks for the login, world and channel servers of a classic MMORPG:
a little-endian packet writer and reader, the client stream cipher, game
constants, TOML server configuration, asyncio connection wrappers, extraction
of item, map, mob and skill records from a game data tree, and the character
encodings used on the character selection screen.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `valhalla.packet` – `Packet`, a `bytearray` with `write_byte`, `write_int8`,
  `write_bool`, `write_int16`/`32`/`64`, `write_uint16`/`32`/`64`,
  `write_bytes`, `write_string` (16-bit length prefix) and
  `write_padded_string`. `create_with_opcode(op)` starts a client-bound packet
  (four header bytes, then the opcode); `create_internal(op)` starts an
  inter-server packet (one length byte, then the opcode).
- `valhalla.reader` – `Reader`, which reads those values back. Reading past
  the end returns a zero value (a single zero byte for `read_bytes`, an empty
  string for `read_string`) instead of raising; `skip` and `rest` move over or
  return the remaining bytes.
- `valhalla.crypt` – `MapleCipher(key, maple_version)` with `encrypt`,
  `decrypt` and `shuffle`; `packet_length` decodes an encrypted four-byte
  header; `maple_encrypt` / `maple_decrypt` and the byte rotations `rol` /
  `ror`.
- `valhalla.constants` – `MAPLE_VERSION` and other protocol sizes,
  `WORLD_NAMES`, `Job`, `StatFlag`, `EXP_TABLE` and `exp_to_next_level(level)`.
- `valhalla.mob_constants` – `MobSkillId`, `MobStat` and `MobStatus`.
- `valhalla.config` – `DbConfig`, `LoginConfig`, `WorldConfig`,
  `ChannelConfig`, `FullConfig`, `load_config(path)` and the helpers
  `login_config_from_file`, `world_config_from_file` and
  `channel_config_from_file`, each returning the server's section together with
  the database section. Bad files raise `ConfigError`.
- `valhalla.world_info` – `World` and `Channel` records; `World.encode(opcode)`
  builds an inter-server info packet, `World.update_from(reader)` reads one
  back, `read_channel(reader)` reads one channel.
- `valhalla.net.event` – `EventType` and `Event`.
- `valhalla.net.conn` – `ServerConnection` and `ClientConnection` over asyncio
  streams. Their `reader()` and `writer()` coroutines run as tasks and post
  `Event`s to a shared queue; `send(packet)` queues a packet and `cleanup()`
  stops the writer. Client connections encrypt and decrypt with
  `MapleCipher` and can simulate latency and jitter.
- `valhalla.nx.node` – `NxNode`, a named node with a value and children,
  `find(path)`, value helpers such as `as_int`, `as_text` and `as_float`, and
  `numeric_id(name)` for names like `01302000.img`.
- `valhalla.nx.items`, `valhalla.nx.mobs`, `valhalla.nx.maps`,
  `valhalla.nx.skilldata` – `extract_items`, `extract_mobs`, `extract_maps`
  and `extract_skills` build `Item`, `Mob`, `Map` and
  `PlayerSkill` / `MobSkill` records from an `NxNode` tree. Unknown options
  and missing sections are logged, not raised.
- `valhalla.login.character` – `Equip`, `Character` and
  `equip_from_nx(item_id, nx_item, creator_name)`;
  `Character.display_bytes()` and `Character.encode()` give the bytes shown on
  the character selection screen.

## Examples

Writing and reading a packet:

```python
from valhalla.packet import create_with_opcode
from valhalla.reader import Reader

packet = create_with_opcode(0x01)
packet.write_string("hello")
packet.write_int32(42)

reader = Reader(packet[4:])
assert reader.read_byte() == 0x01
assert reader.read_string(reader.read_int16()) == "hello"
assert reader.read_int32() == 42
```

Encrypting a client-bound packet and recovering its length from the header:

```python
from valhalla.crypt import MapleCipher, packet_length
from valhalla.packet import create_with_opcode

cipher = MapleCipher(b"\x01\x02\x03\x04", 28)
data = cipher.encrypt(create_with_opcode(0x01), True, False)
assert packet_length(data[:4]) == len(data) - 4
```

Reading a configuration file; keys match field names regardless of case and
underscores:

```toml
[Database]
Address = "localhost"
Port = "3306"
User = "user"
Password = "password"
Database = "game"

[Channel]
WorldAddress = "127.0.0.1"
WorldPort = "8584"
ListenAddress = "0.0.0.0"
ListenPort = "8685"
MaxPop = 250
```

```python
from valhalla.config import channel_config_from_file

channel, database = channel_config_from_file("config.toml")
assert channel.max_pop == 250
```

Extracting items from a data tree:

```python
from valhalla.nx.items import extract_items
from valhalla.nx.node import NxNode

info = NxNode("info", children=[NxNode("incPAD", 17), NxNode("tuc", 7)])
weapon = NxNode("01302000.img", children=[info])
root = NxNode("", children=[
    NxNode("Character", children=[NxNode("Weapon", children=[weapon])]),
])

items = extract_items(root)
assert items[1302000].inc_pad == 17.0
assert items[1302000].inv_tab_id == 1
```

## What this package does not do

- It starts no servers and has no command-line entry point: accepting
  connections, routing events and the login, world and channel logic are left
  to the application built on these pieces.
- It has no database layer; `Character` and `Equip` are plain records and are
  neither loaded nor saved.
- It does not parse binary game data files. `NxNode` trees must be built by
  the caller, and there is no combined store or lookup of the extracted
  records beyond the dictionaries the `extract_*` functions return.
- It has no table of player skill ids per job.