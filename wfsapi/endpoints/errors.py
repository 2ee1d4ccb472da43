from fastapi import HTTPException

from wfsapi.errors import UnknownCollectionError, UnsupportedFormatError


def not_found(resource: str, identifier: str) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "code": "NotFound",
            "description": f"{resource} '{identifier}' not found",
        },
    )


def invalid_parameter(description: str) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={
            "code": "InvalidParameterValue",
            "description": description,
        },
    )


def unsupported_format(error: UnsupportedFormatError) -> HTTPException:
    return invalid_parameter(str(error))


def unknown_collection(error: UnknownCollectionError) -> HTTPException:
    return not_found("Collection", error.collection_id)
