from flask import Blueprint, redirect, url_for, flash, send_file
from flask_login import login_required

from evault.errors import VaultError
from evault.forms.download_form import DownloadForm
from evault.forms.upload_form import UploadForm
from evault.services import get_vault
from evault.workflows import DownloadWorkflow, UploadWorkflow, delete_file
from evault.workflows.download import MISSING_KEY
from evault.workflows.upload import MISSING_INPUT

files_bp = Blueprint("files", __name__)


@files_bp.route("/upload", methods=["POST"])
@login_required
def upload_file():
    form = UploadForm()
    if not form.validate_on_submit():
        flash(MISSING_INPUT, "danger")
        return redirect(url_for("dashboard.dashboard"))

    file = form.file.data
    workflow = UploadWorkflow(get_vault())
    try:
        workflow.run(file.filename, file.stream, file.mimetype, form.public_key.data)
    except VaultError as e:
        flash(e.message, "danger")
    else:
        flash("File uploaded successfully!", "success")
    return redirect(url_for("dashboard.dashboard"))


@files_bp.route("/download/<int:file_id>", methods=["POST"])
@login_required
def download_file(file_id):
    form = DownloadForm()
    if not form.validate_on_submit():
        flash(MISSING_KEY, "danger")
        return redirect(url_for("dashboard.dashboard"))

    workflow = DownloadWorkflow(get_vault())
    try:
        result = workflow.run(file_id, form.private_key.data)
    except VaultError as e:
        flash(e.message, "danger")
        return redirect(url_for("dashboard.dashboard"))

    return send_file(
        result.as_stream(),
        mimetype=result.mime_type,
        as_attachment=True,
        download_name=result.file_name
    )


@files_bp.route("/delete/<int:file_id>", methods=["POST"])
@login_required
def delete(file_id):
    try:
        delete_file(get_vault(), file_id)
    except VaultError as e:
        flash(e.message, "danger")
    else:
        flash("File deleted.", "success")
    return redirect(url_for("dashboard.dashboard"))
