"""
Foodie Finds API: Query Results
=================================

What:  The value every query operation returns instead of raising.
How:   Exactly one of three variants:

           Found(envelope)       rows matched; envelope is the response body
           NotFound(message)     the statement ran and matched no rows
           QueryFailed(message)  the statement could not run at all

       Routes inspect the variant and pick the status code
       (see foodie_finds.routes.common.to_response).
"""

from typing import Generic, TypeVar, Union

from pydantic import BaseModel, Field

EnvelopeT = TypeVar("EnvelopeT")


class Found(BaseModel, Generic[EnvelopeT]):
    """Matching rows, already wrapped in their response envelope."""
    envelope: EnvelopeT = Field(description="Response body for HTTP 200")

    model_config = {"frozen": True}


class NotFound(BaseModel):
    """Empty result set, with a message naming the search criteria."""
    message: str = Field(description="e.g. 'No Restaurant found with id: 5'")

    model_config = {"frozen": True}


class QueryFailed(BaseModel):
    """Storage failure; message is the underlying error text."""
    message: str = Field(description="e.g. 'no such table: restaurants'")

    model_config = {"frozen": True}


QueryResult = Union[Found, NotFound, QueryFailed]
