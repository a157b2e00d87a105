"""Azure Functions App - Python v2 Programming Model with Isolated Worker.

This module defines the Users HTTP triggers using the v2 programming model with
decorator-based function definitions. Callers need a function key for GetUser
and CreateUser; the key check is done by the Functions host.
"""

import json
import logging
from datetime import UTC, datetime

import azure.functions as func

from common.config import get_settings
from common.services import InvalidUserPayloadError, SampleUserService

settings = get_settings()
user_service = SampleUserService()

# Create the function app instance
app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)


@app.function_name(name="GetUser")
@app.route(route="GetUser", methods=["GET"])
def get_user(req: func.HttpRequest) -> func.HttpResponse:
    """Return the sample user record.

    Example:
        GET /api/GetUser -> {"Id":1,"Name":"John"}

    Args:
        req: The HTTP request object; nothing in it is consulted

    Returns:
        HTTP 200 response with the user as JSON
    """
    logging.info("HTTP trigger function processed a request.")

    user = user_service.get_user()
    return func.HttpResponse(
        user.model_dump_json(by_alias=True),
        status_code=200,
        mimetype="application/json",
    )


@app.function_name(name="CreateUser")
@app.route(route="CreateUser", methods=["POST"])
def create_user(req: func.HttpRequest) -> func.HttpResponse:
    """Echo the name of the posted user.

    Example:
        POST /api/CreateUser with JSON body: {"Name": "Alice", "Email": "a@x.com"}

    Args:
        req: The HTTP request object carrying the user as JSON

    Returns:
        HTTP 201 response with a plain text confirmation, or 400 if the body
        is not a user object
    """
    logging.info("CreateUser function processing request.")

    try:
        user = user_service.parse_user(req.get_body())
    except InvalidUserPayloadError as e:
        logging.warning("CreateUser rejected request: %s", e)
        return func.HttpResponse(
            json.dumps({"error": str(e)}),
            status_code=400,
            mimetype="application/json",
        )

    return func.HttpResponse(
        user_service.create_user(user),
        status_code=201,
        mimetype="text/plain",
    )


@app.route(route="health", methods=["GET"], auth_level=func.AuthLevel.ANONYMOUS)
def health_check(req: func.HttpRequest) -> func.HttpResponse:
    """Health check endpoint.

    Returns:
        HTTP 200 response indicating the function app is healthy
    """
    logging.info("Health check endpoint called.")

    health_data = {
        "status": "healthy",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
    }

    return func.HttpResponse(
        json.dumps(health_data),
        status_code=200,
        mimetype="application/json",
    )
