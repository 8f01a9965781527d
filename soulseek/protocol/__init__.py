"""Binary wire format, message codes and zlib compression."""