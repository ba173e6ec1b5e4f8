"""Error handling for the Maximo OSLC client."""

from maximo_client.errors.exceptions import MaximoClientError, Stage
from maximo_client.errors.handler import decode_body, decode_object, raise_for_stage
from maximo_client.errors.models import MaximoErrorDetail

__all__ = [
    "MaximoClientError",
    "MaximoErrorDetail",
    "Stage",
    "decode_body",
    "decode_object",
    "raise_for_stage",
]
