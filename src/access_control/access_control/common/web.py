from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import jsonify, redirect, render_template, session, url_for

from ..core.enums import Role

# One page per role; the home route dispatches through this table only.
HOME_TEMPLATES = {
    Role.SECURITY: "security.html",
    Role.AUTHORIZER: "authorizer.html",
    Role.CONTROLLER: "controller.html",
}


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def home_template_for(role: Optional[Role]) -> Optional[str]:
    return HOME_TEMPLATES.get(role) if role else None


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def render_forbidden():
    return render_template("403.html"), 403


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    """Guard an API route: anyone but a logged-in `role` user gets a 403 JSON body."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session or current_role() != role:
                return json_error("Forbidden", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register_error_handlers(app) -> None:
    """API clients always get the JSON error body, even for errors raised before a view runs."""

    @app.errorhandler(413)
    def too_large(_e):
        return json_error("Uploaded file is too large", 413)
