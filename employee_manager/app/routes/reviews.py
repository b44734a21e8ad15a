from flask_login import login_required

from employee_manager.app import workflow
from employee_manager.app.envelope import success, json_body
from employee_manager.app.models import Feedback, LeaveRequest
from employee_manager.app.routes import reviews_bp as bp


@bp.route('/leave_requests')
@login_required
def list_leave_requests():
    return success([x.to_dict() for x in LeaveRequest.query.order_by(LeaveRequest.id).all()])


@bp.route('/leave_requests/<int:leave_id>', methods=['PUT'])
@login_required
def review_leave_request(leave_id):
    data = json_body()
    workflow.set_leave_status(leave_id, data.get('status'))
    return success(message='Leave request status updated successfully')


@bp.route('/feedback')
@login_required
def list_feedback():
    return success([x.to_dict() for x in Feedback.query.order_by(Feedback.id).all()])


@bp.route('/feedback/<int:feedback_id>', methods=['PUT'])
@login_required
def review_feedback(feedback_id):
    data = json_body()
    workflow.set_feedback_status(feedback_id, data.get('status'))
    return success(message='Feedback status updated successfully')


@bp.route('/feedback/<int:feedback_id>/solution', methods=['PUT'])
@login_required
def feedback_solution(feedback_id):
    data = json_body()
    workflow.set_feedback_solution(feedback_id, data.get('solution'))
    return success(message='Solution updated successfully')
