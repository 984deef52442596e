from pydantic import BaseModel, ConfigDict

class UserBase(BaseModel):
    username: str

class UserOut(UserBase):
    id: int
    name: str
    role: str
    model_config = ConfigDict(from_attributes=True)

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"
