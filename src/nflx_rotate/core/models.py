from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credentials:
    """The account being rotated: who logs in, and from what to what."""
    username: str
    old_password: str = field(repr=False)
    new_password: str = field(repr=False)
    generated: bool = False

    def to_dict(self, include_secrets: bool = False) -> dict:
        """Convert the credentials to a dictionary for logging or display."""
        data = {
            'username': self.username,
            'generated': self.generated,
        }
        if include_secrets:
            data['old_password'] = self.old_password
            data['new_password'] = self.new_password
        return data
