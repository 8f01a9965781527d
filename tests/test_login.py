from ipaddress import IPv4Address
import string

import pytest

from soulseek.protocol.codes import ServerCode
from soulseek.protocol.wire import ProtocolError, Reader, Writer
from soulseek.server.login import (
    LoginRequest,
    LoginResponse,
    Ping,
    decode_login_response,
    decode_ping,
)


def _encode(message):
    writer = Writer()
    message.encode(writer)
    return writer.getvalue()


def test_login_request_defaults():
    password = "password"
    request = LoginRequest(username="user", password=password)
    assert request.username == "user"
    assert request.password == "password"
    assert request.version == 170
    assert request.minor_version == 100
    assert request.code == ServerCode.LOGIN


def test_login_request_encode():
    password = "password"
    request = LoginRequest(
        username="testuser", password=password, version=170, minor_version=100
    )
    reader = Reader(_encode(request))
    assert reader.read_uint32() == 1
    assert reader.read_string() == "testuser"
    assert reader.read_string() == "password"
    assert reader.read_uint32() == 170
    digest = reader.read_string()
    assert len(digest) == 32
    assert set(digest) <= set(string.hexdigits.lower())
    assert reader.read_uint32() == 100
    assert reader.remaining == 0


def test_login_request_hash_depends_on_credentials():
    password = "password"
    first = Reader(_encode(LoginRequest(username="alice", password=password)))
    second = Reader(_encode(LoginRequest(username="bob", password=password)))
    hashes = []
    for reader in (first, second):
        reader.read_uint32()
        reader.read_string()
        reader.read_string()
        reader.read_uint32()
        hashes.append(reader.read_string())
    assert hashes[0] != hashes[1]
    assert all(len(h) == 32 for h in hashes)


def test_decode_login_response_success():
    writer = Writer()
    writer.write_uint32(1)
    writer.write_uint8(1)
    writer.write_string("Welcome to Soulseek!")
    writer.write_bytes(bytes([192, 168, 1, 100]))
    writer.write_string("abc123hash")
    writer.write_uint8(1)

    response = decode_login_response(Reader(writer.getvalue()))

    assert response.succeeded is True
    assert response.message == "Welcome to Soulseek!"
    assert response.ip_address == IPv4Address("100.1.168.192")
    assert response.hash == "abc123hash"
    assert response.is_supporter is True


def test_decode_login_response_failure():
    writer = Writer()
    writer.write_uint32(1)
    writer.write_uint8(0)
    writer.write_string("Invalid password")

    response = decode_login_response(Reader(writer.getvalue()))

    assert response == LoginResponse(succeeded=False, message="Invalid password")
    assert response.ip_address is None
    assert response.hash == ""
    assert response.is_supporter is False


def test_decode_login_response_wrong_code():
    writer = Writer()
    writer.write_uint32(99)
    with pytest.raises(ProtocolError, match="unexpected code"):
        decode_login_response(Reader(writer.getvalue()))


def test_decode_login_response_truncated_success():
    writer = Writer()
    writer.write_uint32(1)
    writer.write_uint8(1)
    writer.write_string("Welcome")
    with pytest.raises(ProtocolError, match="decode login response"):
        decode_login_response(Reader(writer.getvalue()))


def test_decode_login_response_empty():
    with pytest.raises(ProtocolError):
        decode_login_response(Reader(b""))


def test_login_roundtrip_echoes_hash():
    password = "password"
    request = LoginRequest(username="alice", password=password)
    reader = Reader(_encode(request))
    reader.read_uint32()
    reader.read_string()
    reader.read_string()
    reader.read_uint32()
    sent_hash = reader.read_string()

    writer = Writer()
    writer.write_uint32(1)
    writer.write_uint8(1)
    writer.write_string("Logged in")
    writer.write_bytes(bytes([8, 8, 8, 8]))
    writer.write_string(sent_hash)
    writer.write_uint8(0)

    response = decode_login_response(Reader(writer.getvalue()))
    assert response.succeeded is True
    assert response.hash == sent_hash
    assert response.ip_address == IPv4Address("8.8.8.8")
    assert response.is_supporter is False


def test_ping_encode():
    assert _encode(Ping()) == bytes([0x20, 0, 0, 0])


def test_ping_roundtrip_consumes_message():
    reader = Reader(_encode(Ping()))
    decode_ping(reader)
    assert reader.remaining == 0


def test_decode_ping_wrong_code():
    writer = Writer()
    writer.write_uint32(1)
    with pytest.raises(ProtocolError, match="unexpected code 1, want 32"):
        decode_ping(Reader(writer.getvalue()))


def test_decode_ping_truncated():
    with pytest.raises(ProtocolError):
        decode_ping(Reader(b"\x20\x00"))