from flask import Blueprint, current_app, jsonify, request

guide_bp = Blueprint('guides', __name__)

STATUS_CODES = {
    "InvalidInput": 400,
    "NotFound": 404,
    "DuplicateEmail": 409,
    "StorageError": 500
}


def _form():
    """Accepts both JSON object bodies and classic form posts."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form


def _name_parts(data):
    # A single 'name' field stands in for firstName + lastName
    if data.get('name') is not None:
        return data.get('name'), ''
    return data.get('firstName', ''), data.get('lastName', '')


def _respond(result, success_code=200):
    if result['status'] == 'success':
        return jsonify(result), success_code
    return jsonify(result), STATUS_CODES.get(result['error'], 400)


@guide_bp.route('/', methods=['GET'])
def list_guides():
    return jsonify({"guides": current_app.guide_service.list_guides()})


@guide_bp.route('/<email>', methods=['GET'])
def get_guide(email):
    return _respond(current_app.guide_service.get_guide(email))


@guide_bp.route('/', methods=['POST'])
def register_guide():
    data = _form()
    first_name, last_name = _name_parts(data)
    result = current_app.guide_service.register_guide(
        data.get('email', ''),
        data.get('password', ''),
        first_name,
        last_name,
        data.get('emergencyContact', '')
    )
    return _respond(result, success_code=201)


@guide_bp.route('/<email>', methods=['PUT'])
def update_guide(email):
    data = _form()
    first_name, last_name = _name_parts(data)
    result = current_app.guide_service.update_guide(
        email,
        data.get('password', ''),
        first_name,
        last_name,
        data.get('emergencyContact', '')
    )
    return _respond(result)


@guide_bp.route('/<email>', methods=['DELETE'])
def delete_guide(email):
    return _respond(current_app.guide_service.delete_guide(email))
