from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """A registered user.

    Attributes:
        id: Caller-supplied identifier
        name: Display name
        email: Unique e-mail address
        password: Password hash, never the plain value
    """
    __tablename__ = "users"

    id: str = Field(primary_key=True)
    name: str
    email: str = Field(unique=True, index=True)
    password: str
