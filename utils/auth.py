# utils/auth.py
from fastapi import Header, HTTPException
from pydantic import BaseModel


class CurrentUser(BaseModel):
    id: str
    name: str = "Anonymous"
    role: str = "patient"


def get_current_user(
    x_user_id: str = Header(None, alias="X-User-ID"),
    x_user_name: str = Header(None, alias="X-User-Name"),
    x_user_role: str = Header(None, alias="X-User-Role")
):
    if not x_user_id:
        raise HTTPException(401, "X-User-ID header is required")
    return CurrentUser(
        id=x_user_id,
        name=x_user_name or "Anonymous",
        role=x_user_role or "patient"
    )


def get_current_user_admin(
    x_user_id: str = Header(None, alias="X-User-ID"),
    x_user_role: str = Header(None, alias="X-User-Role")
):
    if not x_user_id or not x_user_role:
        raise HTTPException(401, "X-User-ID and X-User-Role headers are required")

    if x_user_role != "admin":
        raise HTTPException(403, "Admin access only")

    return CurrentUser(id=x_user_id, role="admin")
