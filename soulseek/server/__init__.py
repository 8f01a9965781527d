"""Login, status and peer-lookup messages exchanged with the server."""