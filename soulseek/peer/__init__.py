"""Handshake, search-result and transfer messages exchanged between peers."""