import pytest

from soulseek.peer.file import AttributeType, File, FileAttribute, encode_file
from soulseek.peer.search import SearchResponse, decode_search_response
from soulseek.protocol.codes import PeerCode
from soulseek.protocol.compress import compress
from soulseek.protocol.wire import ProtocolError, Writer


def _sample_payload(locked=()) -> Writer:
    w = Writer()
    w.write_string("testuser")
    w.write_uint32(12345)
    w.write_uint32(2)

    w.write_uint8(1)
    w.write_string("Music\\Artist\\Album\\song1.mp3")
    w.write_uint64(5000000)
    w.write_string("mp3")
    w.write_uint32(2)
    w.write_uint32(0)
    w.write_uint32(320)
    w.write_uint32(1)
    w.write_uint32(240)

    w.write_uint8(1)
    w.write_string("Music\\Artist\\Album\\song2.flac")
    w.write_uint64(30000000)
    w.write_string("flac")
    w.write_uint32(1)
    w.write_uint32(1)
    w.write_uint32(300)

    w.write_uint8(1)
    w.write_uint32(100000)
    w.write_uint32(5)
    w.write_uint32(0)

    w.write_uint32(len(locked))
    for f in locked:
        encode_file(w, f)
    return w


def _message(payload: bytes) -> bytes:
    code = Writer()
    code.write_uint32(PeerCode.SEARCH_RESPONSE)
    return code.getvalue() + compress(payload)


def test_decode_search_response():
    resp = decode_search_response(_message(_sample_payload().getvalue()))

    assert resp.username == "testuser"
    assert resp.token == 12345
    assert resp.has_free_slot is True
    assert resp.upload_speed == 100000
    assert resp.queue_length == 5
    assert len(resp.files) == 2
    assert resp.locked_files == []

    f1 = resp.files[0]
    assert f1.filename == "Music\\Artist\\Album\\song1.mp3"
    assert f1.size == 5000000
    assert f1.extension == "mp3"
    assert f1.bit_rate == 320
    assert f1.duration == 240

    f2 = resp.files[1]
    assert f2.filename == "Music\\Artist\\Album\\song2.flac"
    assert f2.size == 30000000
    assert f2.extension == "flac"
    assert f2.duration == 300


def test_decode_search_response_too_short():
    with pytest.raises(ProtocolError, match="too short"):
        decode_search_response(b"\x01\x02")


def test_decode_search_response_invalid_compression():
    data = bytes([0x09, 0x00, 0x00, 0x00, 0xFF, 0xFF, 0xFF, 0xFF])
    with pytest.raises(ProtocolError, match="decompress"):
        decode_search_response(data)


def test_decode_search_response_with_locked_files():
    locked = File(
        filename="Music\\Private\\hidden.mp3",
        size=4000,
        extension="mp3",
        attributes=[FileAttribute(AttributeType.BIT_RATE, 192)],
    )
    resp = decode_search_response(_message(_sample_payload([locked]).getvalue()))
    assert resp.locked_files == [locked]
    assert len(resp.files) == 2


def test_missing_reserved_field_raises():
    w = Writer()
    w.write_string("testuser")
    w.write_uint32(1)
    w.write_uint32(0)
    w.write_uint8(0)
    w.write_uint32(10)
    w.write_uint32(0)
    with pytest.raises(ProtocolError, match="decode search response"):
        decode_search_response(_message(w.getvalue()))


def test_truncated_file_list_raises():
    payload = _sample_payload().getvalue()[:40]
    with pytest.raises(ProtocolError, match="decode search response"):
        decode_search_response(_message(payload))


def test_no_free_slot():
    w = Writer()
    w.write_string("peer")
    w.write_uint32(3)
    w.write_uint32(0)
    w.write_uint8(0)
    w.write_uint32(0)
    w.write_uint32(0)
    w.write_uint32(0)
    w.write_uint32(0)
    resp = decode_search_response(_message(w.getvalue()))
    assert resp == SearchResponse(username="peer", token=3)
    assert resp.has_free_slot is False


def test_message_code():
    assert SearchResponse("u", 1).code == PeerCode.SEARCH_RESPONSE