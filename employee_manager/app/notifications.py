import logging
from smtplib import SMTPException

from flask import current_app
from flask_mail import Message

from employee_manager.app import mail

logger = logging.getLogger(__name__)


def send_task_email(task):
    """Tell the assigned employee about a new task, if mail is configured."""
    if not current_app.config.get('MAIL_SERVER') or not task.employee.email:
        return False
    msg = Message('New Task Allocated',
                  recipients=[task.employee.email])
    deadline = task.deadline.strftime('%Y-%m-%d') if task.deadline else '-'
    msg.body = f'''Dear {task.employee.name},

You have been allocated a new task:
Title: {task.title}
Priority: {task.priority or '-'}
Deadline: {deadline}

{task.description or ''}

Please log in to the employee dashboard to view the details.

Thank you,
Administration
'''
    try:
        mail.send(msg)
    except (SMTPException, OSError) as e:
        logger.warning("Task notification to %s failed: %s", task.employee.email, e)
        return False
    return True
