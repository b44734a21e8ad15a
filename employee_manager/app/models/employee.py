from employee_manager.app import db
from employee_manager.app.uploads import upload_url


class Employee(db.Model):
    __tablename__ = 'employees'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    password = db.Column(db.String(128), nullable=False)  # bcrypt hash
    role = db.Column(db.String(100), nullable=False)
    experience = db.Column(db.Integer, default=0)
    department_id = db.Column(db.Integer, db.ForeignKey('department.id'), nullable=False)
    salary = db.Column(db.Numeric(12, 2), nullable=False)
    degree = db.Column(db.String(100))
    university = db.Column(db.String(150))
    graduation_year = db.Column(db.Integer)
    skills = db.Column(db.Text, default='')
    certifications = db.Column(db.Text, default='')
    mobile_no = db.Column(db.String(20))
    address = db.Column(db.String(255))
    resume = db.Column(db.String(255))
    profile_img = db.Column(db.String(255))

    tasks = db.relationship('Task', backref='employee', lazy=True)

    def to_dict(self):
        # The password hash never leaves the service
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'experience': self.experience,
            'department_id': self.department_id,
            'salary': float(self.salary) if self.salary is not None else None,
            'degree': self.degree,
            'university': self.university,
            'graduation_year': self.graduation_year,
            'skills': self.skills,
            'certifications': self.certifications,
            'mobile_no': self.mobile_no,
            'address': self.address,
            'resume': self.resume,
            'profile_img': self.profile_img,
        }

    def to_details(self):
        details = self.to_dict()
        details['resume'] = upload_url('resume', self.resume)
        details['profile_img'] = upload_url('profile_img', self.profile_img)
        return details

    def __repr__(self):
        return f'<Employee {self.name}>'
