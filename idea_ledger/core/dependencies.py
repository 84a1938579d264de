"""FastAPI dependencies for reaching the application's ledger."""

from typing import Annotated

from fastapi import Depends, Request

from ..services import IdeaLedger


def get_ledger(request: Request) -> IdeaLedger:
    """The ledger opened at startup and kept on the application state."""
    return request.app.state.ledger


LedgerDep = Annotated[IdeaLedger, Depends(get_ledger)]
