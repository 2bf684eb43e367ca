from flask import Blueprint, render_template, flash
from flask_login import login_required, current_user

from evault.errors import WorkflowFailed
from evault.forms.download_form import DeleteForm, DownloadForm
from evault.forms.upload_form import UploadForm
from evault.services import get_vault
from evault.workflows import list_files

dashboard_bp = Blueprint("dashboard", __name__)


def render_dashboard(public_key=None, private_key=None):
    try:
        files = list_files(get_vault())
    except WorkflowFailed as e:
        flash(e.message, "danger")
        files = []
    return render_template(
        "dashboard.html",
        user=current_user,
        upload_form=UploadForm(),
        download_form=DownloadForm(),
        delete_form=DeleteForm(),
        files=files,
        public_key=public_key,
        private_key=private_key
    )


@dashboard_bp.route("/dashboard")
@login_required
def dashboard():
    return render_dashboard()


@dashboard_bp.route("/")
def home():
    return render_template("home.html", user=current_user)
