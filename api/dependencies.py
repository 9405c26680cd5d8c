"""Dependencies shared by the API routes."""

from typing import Annotated
from fastapi import Depends, HTTPException, Request, status

from services.email_generator import EmailGeneratorService


def get_email_generator(request: Request) -> EmailGeneratorService:
    """
    Return the generator created during application startup.

    Raises:
        HTTPException: 503 if the application lifespan has not run
    """
    generator = getattr(request.app.state, "email_generator", None)
    if generator is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Email generator not initialized",
        )
    return generator


# Type alias for dependency injection
EmailGenerator = Annotated[EmailGeneratorService, Depends(get_email_generator)]
