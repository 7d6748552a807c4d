from app.schemas.common import CamelModel
from app.schemas.user import UserOut


class LoginOut(CamelModel):
    token: str
    token_type: str = "bearer"
    user: UserOut
