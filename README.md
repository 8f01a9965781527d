# soulseek

Building blocks for speaking the Soulseek protocol from Python: a
little-endian binary reader and writer, zlib helpers, a framed TCP
connection, and encoders/decoders for the server and peer messages a
client needs to log in, search, and negotiate file transfers.

The package has no runtime dependencies beyond the standard library.

## Layout

| Module | Contents |
| --- | --- |
| `soulseek.protocol.codes` | `ServerCode`, `PeerCode`, `DistributedCode`, `InitCode` |
| `soulseek.protocol.wire` | `Reader`, `Writer`, `ProtocolError` |
| `soulseek.protocol.compress` | `compress`, `decompress` (zlib) |
| `soulseek.connection` | `Connection`, `dial`: length-prefixed message framing over TCP |
| `soulseek.server.login` | `LoginRequest`, `LoginResponse`, `Ping`, `decode_login_response`, `decode_ping` |
| `soulseek.server.status` | `ServerMessage`, `FileSearch`, `SetListenPort`, `SetOnlineStatus`, `UserPresence`, `SharedFoldersAndFiles` |
| `soulseek.server.peers` | `ConnectToPeer`, `ConnectToPeerRequest`, `ConnectionType`, `GetPeerAddress`, `GetPeerAddressResponse`, `decode_connect_to_peer`, `decode_get_peer_address` |
| `soulseek.peer.handshake` | `PeerInit`, `PierceFirewall`, `decode_peer_init`, `decode_pierce_firewall` |
| `soulseek.peer.file` | `File`, `FileAttribute`, `AttributeType`, `decode_file`, `encode_file` |
| `soulseek.peer.search` | `SearchResponse`, `decode_search_response` |
| `soulseek.peer.transfer` | `PeerMessage`, `TransferDirection`, `TransferRequest`, `TransferResponse`, `QueueDownload`, `PlaceInQueueRequest`, `PlaceInQueueResponse`, `UploadFailed`, `UploadDenied` and a `decode_*` function for each |

## Wire primitives

All integers are little-endian; strings are a 4-byte length followed by
UTF-8 bytes.

```python
from soulseek.protocol.wire import Reader, Writer

writer = Writer()
writer.write_uint32(42)
writer.write_string("hello world")
data = writer.getvalue()

reader = Reader(data)
assert reader.read_uint32() == 42
assert reader.read_string() == "hello world"
```

Reading past the end of the data, asking for a negative byte count, or
reading a string whose length prefix exceeds 10 MiB raises
`ProtocolError` (a subclass of `ValueError`); a failed read consumes
nothing. Writing an integer outside the range of its type raises
`ProtocolError` as well.

`compress` and `decompress` wrap zlib; `decompress` raises
`ProtocolError` for an invalid or truncated stream.

## Encoding messages

Every outgoing message has an `encode(writer)` method that writes its
message code followed by its fields:

```python
from soulseek.protocol.wire import Writer
from soulseek.server.login import LoginRequest
from soulseek.server.status import FileSearch

password = "password"
writer = Writer()
LoginRequest(username="alice", password=password).encode(writer)
FileSearch(token=12345, query="artist album mp3").encode(writer)
payload = writer.getvalue()
```

`LoginRequest` defaults to version 170 and minor version 100 and sends
the hex MD5 of username plus password alongside them.

## Decoding messages

Server messages are decoded from a `Reader` positioned at the message
code; peer messages are decoded from a payload (without the length
prefix). A message with the wrong code, or one cut short, raises
`ProtocolError`:

```python
from soulseek.peer.transfer import decode_transfer_response

response = decode_transfer_response(payload)
if response.allowed:
    print("peer accepted, size", response.file_size)
else:
    print("peer refused:", response.reason)
```

Search responses arrive zlib-compressed after their 4-byte code;
`decode_search_response` takes the whole payload and returns the
username, token, files, locked files and the peer's free-slot, upload
speed and queue length. Each `File` exposes its attributes as
`bit_rate`, `duration`, `bit_depth`, `sample_rate` and `is_vbr`.

IP addresses in `LoginResponse`, `ConnectToPeer` and
`GetPeerAddressResponse` are `ipaddress.IPv4Address` values.

## Connections

`dial(address, timeout)` opens a TCP connection to a server or peer
(`address` is `"host:port"` or a `(host, port)` pair) and returns a
`Connection`, which frames every message with its 4-byte length and
raises `ProtocolError` for incoming messages larger than 100 MiB. A
connection closed mid-message raises `ConnectionError`. Raw `read` and
`write` bypass the framing for file-transfer streams, and
`set_timeout` applies to both directions.

```python
from soulseek.connection import dial
from soulseek.protocol.wire import Writer
from soulseek.server.status import SetListenPort

with dial(("server.example.com", 2242), 10.0) as conn:
    writer = Writer()
    SetListenPort(port=50000).encode(writer)
    conn.write_message(writer.getvalue())
    reply = conn.read_message()
```

## What this package does not do

It is a message and framing library, not a client. It has no login or
session loop, no listener for incoming peer connections, no upload or
download queues, no slot management, no file sharing index and no
command-line program. Distributed-network messages are only named by
`DistributedCode`; there are no encoders or decoders for them.

## Tests

The test suite uses pytest and is installed with the `test` extra.