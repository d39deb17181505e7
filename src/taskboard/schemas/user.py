from pydantic import BaseModel, ConfigDict


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    # password is never exposed


class UserCreated(BaseModel):
    message: str
    user: UserOut
