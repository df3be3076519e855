from flask import current_app, jsonify
from werkzeug.exceptions import HTTPException
from campus_cms.domain.exceptions import CMSError
from campus_cms.extensions import jwt


def error_response(code: str, message: str, status: int):
    response = jsonify({
        "error": code,
        "message": message
    })
    response.status_code = status
    return response


def register_error_handlers(app):
    # Token failures share the CMS error body
    @jwt.unauthorized_loader
    def handle_missing_token(reason):
        return error_response("Unauthenticated", reason, 401)

    @jwt.invalid_token_loader
    def handle_invalid_token(reason):
        return error_response("Unauthenticated", reason, 401)

    @jwt.expired_token_loader
    def handle_expired_token(jwt_header, jwt_payload):
        return error_response("Unauthenticated", "Token has expired", 401)

    @app.errorhandler(CMSError)
    def handle_cms_error(error):
        if error.status_code >= 500:
            current_app.logger.warning("%s: %s", error.code, error)
        return error_response(error.code, str(error), error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return error_response(error.name.replace(" ", ""), error.description, error.code)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        current_app.logger.exception("Unhandled error")
        return error_response("InternalError", "Internal server error", 500)
