from flask import Blueprint, flash, redirect, url_for
from flask_login import login_required

from evault.errors import WorkflowFailed
from evault.routes.dashboard import render_dashboard
from evault.services import get_vault
from evault.workflows import generate_keys

keys_bp = Blueprint("keys", __name__)


@keys_bp.route("/keys", methods=["POST"])
@login_required
def generate():
    # The pair is rendered once for the user to copy. Nothing is kept.
    try:
        public_key, private_key = generate_keys(get_vault())
    except WorkflowFailed as e:
        flash(e.message, "danger")
        return redirect(url_for("dashboard.dashboard"))
    return render_dashboard(public_key=public_key, private_key=private_key)
