from flask_login import login_required

from employee_manager.app import allocation
from employee_manager.app.envelope import success, json_body
from employee_manager.app.routes import tasks_bp as bp


@bp.route('/allocate_work', methods=['POST'])
@login_required
def allocate_work():
    task = allocation.create_task(json_body())
    return success({'insertId': task.id})


@bp.route('/get_tasks')
@login_required
def list_tasks():
    # Polled by the task board every few seconds
    return success(allocation.list_tasks())


@bp.route('/get_task/<int:task_id>')
@login_required
def get_task(task_id):
    return success(allocation.get_task(task_id).to_dict())


@bp.route('/edit_task/<int:task_id>', methods=['PUT'])
@login_required
def edit_task(task_id):
    allocation.update_task(task_id, json_body())
    return success(message='Task updated successfully')


@bp.route('/update_task_status/<int:task_id>', methods=['PUT'])
@login_required
def update_task_status(task_id):
    data = json_body()
    task = allocation.update_task_status(task_id, data.get('status'))
    return success(task.to_dict(), message='Task status updated successfully')


@bp.route('/delete_task/<int:task_id>', methods=['DELETE'])
@login_required
def delete_task(task_id):
    allocation.delete_task(task_id)
    return success(message='Task deleted successfully')
