from pydantic import BaseModel


# Fields are forwarded exactly as typed; the remote API does all validation.
class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str


class VerifyEmailRequest(BaseModel):
    email: str
    code: str


class LoginRequest(BaseModel):
    email: str
    password: str
