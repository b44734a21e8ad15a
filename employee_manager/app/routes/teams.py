from flask_login import login_required

from employee_manager.app import allocation
from employee_manager.app.envelope import success, json_body
from employee_manager.app.routes import teams_bp as bp


@bp.route('/create_team', methods=['POST'])
@login_required
def create_team():
    team = allocation.create_team(json_body())
    return success(message='Team created successfully', TeamId=team.team_id)


@bp.route('/get_teams')
@login_required
def list_teams():
    return success(allocation.list_teams())


@bp.route('/get_team/<int:team_id>')
@login_required
def get_team(team_id):
    return success(allocation.get_team(team_id).to_dict())


@bp.route('/edit_team/<int:team_id>', methods=['PUT'])
@login_required
def edit_team(team_id):
    allocation.update_team(team_id, json_body())
    return success(message='Team updated successfully')


@bp.route('/delete_team/', defaults={'team_id': None}, methods=['DELETE'])
@bp.route('/delete_team/<int:team_id>', methods=['DELETE'])
@login_required
def delete_team(team_id):
    allocation.delete_team(team_id)
    return success(message='Team deleted successfully')
