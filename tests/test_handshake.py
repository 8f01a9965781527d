import pytest

from soulseek.peer.handshake import (
    PeerInit,
    PierceFirewall,
    decode_peer_init,
    decode_pierce_firewall,
)
from soulseek.protocol.codes import InitCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer


def _encode(message) -> bytes:
    w = Writer()
    message.encode(w)
    return w.getvalue()


def test_peer_init_round_trip():
    original = PeerInit(username="testuser", type="P", token=12345)
    assert decode_peer_init(_encode(original)) == original


@pytest.mark.parametrize("kind", ["P", "F", "D"])
def test_peer_init_connection_types(kind):
    decoded = decode_peer_init(_encode(PeerInit("someone", kind, 7)))
    assert decoded.type == kind


def test_peer_init_wire_layout():
    data = _encode(PeerInit(username="testuser", type="F", token=99999))
    assert data[0] == InitCode.PEER_INIT
    reader = Reader(data[1:])
    assert reader.read_string() == "testuser"
    assert reader.read_string() == "F"
    assert reader.read_uint32() == 99999
    assert reader.remaining == 0


def test_peer_init_empty_raises():
    with pytest.raises(ProtocolError, match="empty init message"):
        decode_peer_init(b"")


def test_peer_init_wrong_code_raises():
    data = bytearray(_encode(PeerInit("u", "P", 1)))
    data[0] = InitCode.PIERCE_FIREWALL
    with pytest.raises(ProtocolError, match="unexpected init code"):
        decode_peer_init(bytes(data))


def test_peer_init_truncated_raises():
    data = _encode(PeerInit("testuser", "P", 12345))[:-2]
    with pytest.raises(ProtocolError, match="decode init"):
        decode_peer_init(data)


def test_pierce_firewall_round_trip():
    original = PierceFirewall(token=12345)
    assert decode_pierce_firewall(_encode(original)) == original


def test_pierce_firewall_wire_layout():
    data = _encode(PierceFirewall(token=12345))
    assert len(data) == 5
    assert data[0] == InitCode.PIERCE_FIREWALL
    assert Reader(data[1:]).read_uint32() == 12345


def test_pierce_firewall_too_short_raises():
    data = _encode(PierceFirewall(token=1))[:4]
    with pytest.raises(ProtocolError, match="too short"):
        decode_pierce_firewall(data)


def test_pierce_firewall_wrong_code_raises():
    data = bytearray(_encode(PierceFirewall(token=1)))
    data[0] = InitCode.PEER_INIT
    with pytest.raises(ProtocolError, match="unexpected init code"):
        decode_pierce_firewall(bytes(data))


def test_pierce_firewall_ignores_trailing_bytes():
    data = _encode(PierceFirewall(token=777)) + b"\x01\x02"
    assert decode_pierce_firewall(data).token == 777