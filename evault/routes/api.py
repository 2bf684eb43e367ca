from flask import Blueprint, jsonify
from flask_login import login_required

from evault.errors import WorkflowFailed
from evault.extensions import csrf
from evault.services import get_vault
from evault.workflows import generate_keys, list_files

api_bp = Blueprint("api", __name__, url_prefix="/api")
csrf.exempt(api_bp)


@api_bp.route("/files", methods=["GET"])
@login_required
def files():
    try:
        records = list_files(get_vault())
    except WorkflowFailed as e:
        return jsonify({"error": e.message}), 500
    return jsonify([r.to_dict() for r in records])


@api_bp.route("/keys", methods=["POST"])
@login_required
def keys():
    try:
        public_key, private_key = generate_keys(get_vault())
    except WorkflowFailed as e:
        return jsonify({"error": e.message}), 500
    return jsonify({"public_key": public_key, "private_key": private_key})
