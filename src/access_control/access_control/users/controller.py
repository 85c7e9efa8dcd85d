from __future__ import annotations

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.web import current_role, home_template_for, login_required, render_forbidden
from ..container import Container
from ..core.app_logger import get_logger
from ..core.exceptions import AuthenticationError

logger = get_logger("web.users")


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET", "POST"], endpoint="login")
    def login():
        if "user_id" in session:
            return redirect(url_for("home"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                s_user = container.auth_service.authenticate(username, password)

                session.clear()
                session["user_id"] = s_user.user_id
                session["name"] = s_user.username
                session["role"] = s_user.role.value

                return redirect(url_for("home"))
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Login failed for %r", username)
                flash("System error during login", "danger")

        return render_template("login.html")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("Logged out.", "info")
        return redirect(url_for("login"))

    @app.route("/home", endpoint="home")
    @login_required
    def home():
        user = container.users_repo.get_by_id(int(session["user_id"]))
        if not user or not user.is_active:
            session.clear()
            return redirect(url_for("login"))

        template = home_template_for(current_role())
        if not template:
            return render_forbidden()
        return render_template(template, name=session.get("name"))
