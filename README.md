# metaverse_messages

Reading and writing the UDP messages that an OpenSimulator viewer and a
simulator exchange, plus the XML-RPC call that logs a user in.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Packets

A `Packet` (in `metaverse_messages.packet`) pairs a `Header` with a
message body.

- `Packet.from_bytes` reads the header with `Header.from_bytes`. The
  header holds the flags, the sequence number, the frequency and the
  message id.
- If the zero-coded flag is set, the body goes through `zero_decode`.
- `packet_types.body_from_id` then picks the body class by id and
  frequency.
- `Packet.to_bytes` writes the header and the body back out.
- `Packet.new(body)` wraps a body in the default header for its message
  type. That header carries the message's id and frequency, its reliable
  flag, and its sequence number.

```python
from metaverse_messages.packet import Packet
from metaverse_messages.complete_ping_check import CompletePingCheck

packet = Packet.new(CompletePingCheck(ping_id=7))
wire = packet.to_bytes()
```

`zero_encode` does the reverse of `zero_decode`. It turns each run of
zeros into a zero byte followed by a count, and splits runs longer than
255. `Packet.to_bytes` does not call it, so a body is written as it is
even when the header's `zerocoded` flag is set.

The package reads and writes these message bodies:

| Frequency | Id  | Class                   | Module                    |
|-----------|-----|-------------------------|---------------------------|
| High      | 2   | `CompletePingCheck`     | `complete_ping_check`     |
| High      | 4   | `AgentUpdate`           | `agent_update`            |
| Medium    | 6   | `CoarseLocationUpdate`  | `coarse_location_update`  |
| Low       | 3   | `CircuitCode`           | `circuit_code`            |
| Low       | 80  | `ChatFromViewer`        | `chat_from_viewer`        |
| Low       | 139 | `ChatFromSimulator`     | `chat_from_simulator`     |
| Low       | 152 | `DisableSimulator`      | `disable_simulator`       |
| Low       | 249 | `CompleteAgentMovement` | `complete_agent_movement` |
| Fixed     | 66  | `Login`                 | `login`                   |
| Fixed     | 251 | `PacketAck`             | `packet_ack`              |

Every message class has `from_bytes` and `to_bytes`. If the data is too
short, they raise `ValueError`.

`body_from_id` raises `UnknownPacketError`, a subclass of `ValueError`,
for any id and frequency pair not in the table. `message_type(body)`
gives the broad role of a body as a `MessageType`, such as
`MessageType.EVENT` or `MessageType.OUTGOING`.

`AgentUpdate` uses `Vector3` and `Quaternion` for its camera and
rotations. It also carries three bit sets, all `IntFlag`s:

- `AgentState`
- `ControlFlags`
- `UpdateFlags`

## Logging in

These functions live in `metaverse_messages.login`:

- `build_login_protocol` fills a `SimulatorLoginProtocol` from a `Login`
  and from details of this machine. It hashes the password with
  `hash_passwd`.
- `login_to_simulator` posts the protocol's `to_value()` struct to `url`
  as a `login_to_simulator` XML-RPC call, using httpx.
  - If the reply converts to a `LoginResponse`, it returns that response.
  - If the request or the XML-RPC parsing fails, it raises a `LoginError`
    with reason `LoginReason.CONNECTION`.
  - If the reply is a login failure, it raises a `LoginError` built from
    that reply.

```python
import asyncio
from metaverse_messages.login import Login, build_login_protocol, login_to_simulator

password = "password"
login = Login(
    first="default",
    last="user",
    passwd=password,
    start="home",
    channel="benthic",
    agree_to_tos=True,
    read_critical=True,
    url="http://localhost:9000",
)
response = asyncio.run(login_to_simulator(build_login_protocol(login), login.url))
print(response.first_name, response.circuit_code)
```

`LoginResponse.from_value` and `LoginResponse.to_value` convert between
the typed response and plain XML-RPC values:

- a struct is a `dict`;
- an array is a `list`;
- scalars are `str`, `int` and `bool`.

The parts of a response, such as `HomeValues`, `BuddyListValues` and
`InventorySkeletonValues`, live in `metaverse_messages.login_types`.

## Errors

`metaverse_messages.errors` holds these errors:

- `SessionError` wraps one of `CircuitCodeError`,
  `CompleteAgentMovementError`, `LoginError`, `MailboxError` or
  `AckError`.
- `SessionError.to_bytes` serializes the wrapped error as JSON.
- `SessionError.from_bytes` reads it back. It returns `None` when the
  data is not a valid error.
- `create_login_error_from_message` builds a `LoginError` from a failed
  login reply.

## What this package does not do

The package encodes and decodes messages, and it performs the XML-RPC
login call. It does not open UDP sockets, run a session, resend reliable
packets or track acknowledgements. Those are left to the program that
uses it.

Only the messages in the table above are understood. Any other id raises
`UnknownPacketError`, and that includes StartPingCheck and the region
handshake messages.