from dataclasses import dataclass, field


@dataclass(frozen=True)
class ShopSession:
    """
    Credentials of the signed-in shopper.

    The server keeps no session, so user-scoped calls take this object and
    send both fields with each request. Logging out means dropping it.
    """
    username: str
    password: str = field(repr=False)

    def credentials(self) -> dict[str, str]:
        return {"username": self.username, "password": self.password}
