"""
REST routes.

Defines the member endpoints under /rest/members and maps registration
outcomes to HTTP responses:

- success -> 201 with the created member
- InvalidMember -> 400 with {field: message}
- EmailAlreadyRegistered -> 409 with {"error": message}
- anything else -> 500 with a generic {"error": message}
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from kitchensink.api.dependencies import get_member_service
from kitchensink.api.models import ErrorResponse, MemberRequest, MemberResponse
from kitchensink.domain.exceptions import EmailAlreadyRegistered, InvalidMember
from kitchensink.domain.registration import MemberService

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred during registration."

router = APIRouter(prefix="/members", tags=["members"])


@router.get(
    "",
    response_model=list[MemberResponse],
    summary="List all members",
    description="Return every registered member ordered by name.",
)
def list_members(
    service: MemberService = Depends(get_member_service),
) -> list[MemberResponse]:
    logger.info("GET /members request received")
    return [MemberResponse.from_domain(member) for member in service.list_all()]


@router.get(
    "/{member_id}",
    response_model=MemberResponse,
    responses={404: {"description": "Member not found"}},
    summary="Get a member by id",
)
def get_member(
    member_id: str,
    service: MemberService = Depends(get_member_service),
) -> MemberResponse:
    logger.info("GET /members/%s request received", member_id)
    member = service.find_by_id(member_id)
    if member is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Member not found")
    return MemberResponse.from_domain(member)


@router.post(
    "",
    response_model=MemberResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Field validation failed; body maps field names to messages"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        500: {"model": ErrorResponse, "description": "Unexpected failure"},
    },
    summary="Register a new member",
    description="Validate and persist a new member. The member id is generated by the store.",
)
def create_member(
    request_data: MemberRequest,
    service: MemberService = Depends(get_member_service),
) -> MemberResponse | JSONResponse:
    """
    Register a new member.

    - **name**: 1-25 characters, no digits
    - **email**: well-formed and not yet registered
    - **phoneNumber**: 10-12 digits
    """
    logger.info("POST /members request received")
    try:
        member = service.register(request_data.to_domain())
    except InvalidMember as e:
        logger.warning("Validation failed for member registration: %s", e)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=e.errors)
    except EmailAlreadyRegistered as e:
        logger.warning("Business validation failed for member registration: %s", e)
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"error": str(e)})
    except Exception:
        logger.exception("Error registering member")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": UNEXPECTED_ERROR_MESSAGE},
        )
    return MemberResponse.from_domain(member)
