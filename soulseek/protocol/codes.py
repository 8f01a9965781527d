"""Message codes used on server, peer, distributed and init connections."""

from __future__ import annotations

from enum import IntEnum


class ServerCode(IntEnum):
    """Server message type, sent as a 4-byte code."""

    LOGIN = 1
    SET_LISTEN_PORT = 2
    GET_PEER_ADDRESS = 3
    WATCH_USER = 5
    UNWATCH_USER = 6
    GET_STATUS = 7
    SAY_IN_CHAT_ROOM = 13
    JOIN_ROOM = 14
    LEAVE_ROOM = 15
    USER_JOINED_ROOM = 16
    USER_LEFT_ROOM = 17
    CONNECT_TO_PEER = 18
    PRIVATE_MESSAGE = 22
    ACKNOWLEDGE_PRIVATE_MESSAGE = 23
    FILE_SEARCH = 26
    SET_ONLINE_STATUS = 28
    PING = 32
    SEND_SPEED = 34
    SHARED_FOLDERS_AND_FILES = 35
    GET_USER_STATS = 36
    KICKED_FROM_SERVER = 41
    USER_SEARCH = 42
    ROOM_LIST = 64
    GLOBAL_ADMIN_MESSAGE = 66
    PRIVILEGED_USERS = 69
    HAVE_NO_PARENTS = 71
    PARENTS_IP = 73
    CHECK_PRIVILEGES = 92
    EMBEDDED_MESSAGE = 93
    ACCEPT_CHILDREN = 100
    NET_INFO = 102
    WISHLIST_SEARCH = 103
    ROOM_TICKERS = 113
    ROOM_SEARCH = 120
    SEND_UPLOAD_SPEED = 121
    USER_PRIVILEGES = 122
    GIVE_PRIVILEGES = 123
    NOTIFY_PRIVILEGES = 124
    BRANCH_LEVEL = 126
    BRANCH_ROOT = 127
    CHILD_DEPTH = 129
    DISTRIBUTED_RESET = 130
    PRIVATE_ROOM_USERS = 133
    PRIVATE_ROOM_ADD_USER = 134
    PRIVATE_ROOM_REMOVE_USER = 135
    PRIVATE_ROOM_TOGGLE = 141
    NEW_PASSWORD = 142
    PRIVATE_ROOM_ADD_OPERATOR = 143
    PUBLIC_CHAT = 152
    CANNOT_CONNECT = 1001


class PeerCode(IntEnum):
    """Peer message type, sent as a 4-byte code."""

    BROWSE_REQUEST = 4
    BROWSE_RESPONSE = 5
    SEARCH_RESPONSE = 9
    INFO_REQUEST = 15
    INFO_RESPONSE = 16
    FOLDER_CONTENTS_REQUEST = 36
    FOLDER_CONTENTS_RESPONSE = 37
    TRANSFER_REQUEST = 40
    TRANSFER_RESPONSE = 41
    QUEUE_DOWNLOAD = 43
    PLACE_IN_QUEUE_RESPONSE = 44
    UPLOAD_FAILED = 46
    UPLOAD_DENIED = 50
    PLACE_IN_QUEUE_REQUEST = 51


class DistributedCode(IntEnum):
    """Distributed network message type, sent as a 1-byte code."""

    PING = 0
    SEARCH_REQUEST = 3
    BRANCH_LEVEL = 4
    BRANCH_ROOT = 5
    CHILD_DEPTH = 7
    EMBEDDED_MESSAGE = 93


class InitCode(IntEnum):
    """Connection initialisation message type, sent as a 1-byte code."""

    PIERCE_FIREWALL = 0
    PEER_INIT = 1