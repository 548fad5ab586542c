# Standard library imports
from typing import Any

# External package imports
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def write_response(status_code: int, payload: Any) -> JSONResponse:
    """
    Serialize ``payload`` as the JSON body of a response
    
    Plain strings are encoded as JSON strings (``"OK"`` -> ``"\\"OK\\""``).
    
    Args:
        status_code: HTTP status code
        payload: Any value ``jsonable_encoder`` understands (DTOs, dicts, lists, str)
        
    Returns:
        JSONResponse ready to be returned from a route
    """
    return JSONResponse(status_code=status_code, content=jsonable_encoder(payload))
