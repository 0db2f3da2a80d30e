"""Service layer for practice sessions."""
from __future__ import annotations

from loguru import logger
from sqlalchemy import select, update

from langbuddy.db.models.practice import PracticeSession
from langbuddy.schemas.practice import PracticeSessionComplete, PracticeSessionStart
from langbuddy.services.base import OwnedRecordService, page_offset
from langbuddy.utils.exceptions import NotFoundError


class PracticeSessionService(OwnedRecordService):
    """Start, complete and page through the caller's practice sessions."""

    def get_owned_session(self, session_id: str, user_id: str) -> PracticeSession:
        stmt = select(PracticeSession).where(
            PracticeSession.id == session_id,
            PracticeSession.user_id == user_id,
        )
        session = self.db.scalars(stmt).first()
        if session is None:
            logger.warning(f"Practice session {session_id} not found for user {user_id}")
            raise NotFoundError("Practice session not found.")
        return session

    def start(self, user_id: str, payload: PracticeSessionStart) -> PracticeSession:
        """Open a session against one of the caller's profiles."""

        self.get_owned_profile(payload.language_profile_id, user_id)
        started_at = self.clock()
        session = PracticeSession(
            id=self.id_factory(),
            language_profile_id=payload.language_profile_id,
            user_id=user_id,
            mode=payload.mode,
            started_at=started_at,
            ended_at=None,
            total_questions=payload.total_questions,
            correct_answers=None,
            notes=payload.notes,
            created_at=started_at,
        )
        self.db.add(session)
        self.db.commit()
        logger.info(f"Started practice session {session.id} ({session.mode or 'unspecified'} mode)")
        return session

    def complete(
        self, user_id: str, session_id: str, payload: PracticeSessionComplete
    ) -> PracticeSession:
        """Stamp ``ended_at`` and merge the final counters.

        Completing an already completed session is allowed and simply
        stamps it again.
        """

        session = self.get_owned_session(session_id, user_id)
        ended_at = payload.ended_at if payload.ended_at is not None else self.clock()

        def merged(field: str):
            value = getattr(payload, field)
            return value if value is not None else getattr(session, field)

        self.db.execute(
            update(PracticeSession)
            .where(PracticeSession.id == session_id, PracticeSession.user_id == user_id)
            .values(
                total_questions=merged("total_questions"),
                correct_answers=merged("correct_answers"),
                notes=merged("notes"),
                ended_at=ended_at,
            )
        )
        self.db.commit()
        logger.info(f"Completed practice session {session_id}")
        return session

    def list_sessions(
        self, user_id: str, *, language_profile_id: str, page: int, page_size: int
    ) -> list[PracticeSession]:
        """Return one page of the caller's sessions in ``language_profile_id``."""

        stmt = (
            select(PracticeSession)
            .where(
                PracticeSession.language_profile_id == language_profile_id,
                PracticeSession.user_id == user_id,
            )
            .order_by(PracticeSession.started_at, PracticeSession.id)
            .offset(page_offset(page, page_size))
            .limit(page_size)
        )
        return list(self.db.scalars(stmt))
