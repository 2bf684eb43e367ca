from flask import Blueprint, render_template, redirect, url_for, flash
from flask_login import login_required

from evault.errors import VaultError
from evault.forms.login_form import LoginForm
from evault.forms.register_form import RegisterForm
from evault.services import get_vault

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["GET", "POST"])
def login():
    form = LoginForm()
    if form.validate_on_submit():
        try:
            get_vault().auth.sign_in(form.email.data, form.password.data)
        except VaultError as e:
            flash(e.message, "danger")
        else:
            flash("Logged in successfully!", "success")
            return redirect(url_for("dashboard.dashboard"))
    return render_template("login.html", login_form=form)


@auth_bp.route("/register", methods=["GET", "POST"])
def register():
    form = RegisterForm()
    if form.validate_on_submit():
        try:
            get_vault().auth.sign_up(form.email.data, form.password.data)
        except VaultError as e:
            flash(e.message, "danger")
        else:
            flash("Sign-up successful! You can log in now.", "success")
            return redirect(url_for("auth.login"))
    return render_template("register.html", register_form=form)


@auth_bp.route("/logout", methods=["GET", "POST"])
@login_required
def logout():
    get_vault().auth.sign_out()
    return redirect(url_for("dashboard.home"))
