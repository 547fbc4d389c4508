# --- Guide Entity ---
class Guide:
    def __init__(self, email, password, name, emergency_contact):
        self.email = email                          # guides.email (PK)
        self.password = password
        self.name = name                            # first name + last name
        self.emergency_contact = emergency_contact

    def copy(self):
        return Guide(self.email, self.password, self.name, self.emergency_contact)

    def to_dict(self):
        """Public representation. The password is never exposed."""
        return {
            "email": self.email,
            "name": self.name,
            "emergencyContact": self.emergency_contact
        }

    def __eq__(self, other):
        if not isinstance(other, Guide):
            return NotImplemented
        return (self.email, self.password, self.name, self.emergency_contact) == \
            (other.email, other.password, other.name, other.emergency_contact)

    def __repr__(self):
        return f"Guide(email={self.email!r}, name={self.name!r})"
