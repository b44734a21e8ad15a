"""Review of leave requests and feedback: pending -> approved | rejected."""
import logging

from employee_manager.app import db
from employee_manager.app.errors import NotFoundError, ValidationError
from employee_manager.app.models import DECISIONS, Feedback, LeaveRequest

logger = logging.getLogger(__name__)


def _set_status(model, record_id, status, label):
    if status not in DECISIONS:
        raise ValidationError("Invalid status")
    updated = model.query.filter_by(id=record_id).update({'status': status}, synchronize_session=False)
    db.session.commit()
    if not updated:
        raise NotFoundError(f"{label} not found")
    logger.info("%s %s marked %s", label, record_id, status)


def set_leave_status(leave_id, status):
    _set_status(LeaveRequest, leave_id, status, "Leave request")


def set_feedback_status(feedback_id, status):
    _set_status(Feedback, feedback_id, status, "Feedback")


def set_feedback_solution(feedback_id, solution):
    if not solution:
        raise ValidationError("Solution cannot be empty")
    updated = Feedback.query.filter_by(id=feedback_id).update({'solution': solution}, synchronize_session=False)
    db.session.commit()
    if not updated:
        raise NotFoundError("Feedback not found")
