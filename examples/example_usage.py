"""Example: drive the attendance services directly, without any transport layer."""

from datetime import datetime

from src.trainee_attendance.trainee_attendance.attendance.model import DailyEdit
from src.trainee_attendance.trainee_attendance.core.enums import Role
from src.trainee_attendance.trainee_attendance.main import create_container
from src.trainee_attendance.trainee_attendance.users.model import Actor


def main():
    container = create_container()
    service = container.attendance_service
    trainee = Actor(user_id=1, role=Role.TRAINEE, course_id=1, user_name="Trainee A")

    print(service.punch_in(trainee, now=datetime.now()))

    today = datetime.now().date()
    print(service.update_sheet(trainee, [DailyEdit(training_date=today, start_hour=9, start_minute=0, note="example")]))

    for row in service.list_attendance(trainee.user_id):
        print(row.training_date, row.training_start_time, row.training_end_time, row.status_display_name)


if __name__ == "__main__":
    main()
