from datetime import datetime

from employee_manager.app import db


class Team(db.Model):
    __tablename__ = 'teams'

    team_id = db.Column(db.Integer, primary_key=True)
    team_name = db.Column(db.String(100), nullable=False)
    # Ordered list of employee ids, not checked against the employees table
    team_members = db.Column(db.JSON, nullable=False)
    department_id = db.Column(db.Integer, db.ForeignKey('department.id'), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'team_id': self.team_id,
            'team_name': self.team_name,
            'team_members': list(self.team_members or []),
            'department_id': self.department_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Team {self.team_name}: {self.team_members}>'
