"""Create the database schema and load sample users and courses.

Usage:
    python -m course_api.seed
"""
from course_api.auth.passwords import hash_password
from course_api.database import SessionLocal, init_schema
from course_api.repositories.orm import SqlAlchemyCourseRepository, SqlAlchemyUserRepository

SAMPLE_USERS = [
    {'first_name': 'Joe', 'last_name': 'Smith', 'email_address': 'joe@smith.com', 'password': 'joepassword'},
    {'first_name': 'Sally', 'last_name': 'Jones', 'email_address': 'sally@jones.com', 'password': 'sallypassword'},
]

SAMPLE_COURSES = [
    {
        'owner': 'joe@smith.com',
        'title': 'Build a Basic Bookcase',
        'description': 'High-end furniture projects are great to dream about.',
        'estimated_time': '12 hours',
        'materials_needed': '* 1/2 x 3/4 inch parting strip\n* 1 x 2 common pine\n* Wood glue',
    },
    {
        'owner': 'sally@jones.com',
        'title': 'Learn How to Program',
        'description': 'In this course, you\'ll learn how to write code like a pro!',
        'estimated_time': '6 hours',
        'materials_needed': '* Notebook computer running Mac OS X or Windows\n* Text editor',
    },
]


def seed(db) -> tuple[int, int]:
    users = SqlAlchemyUserRepository(db)
    courses = SqlAlchemyCourseRepository(db)
    created_users = 0
    created_courses = 0

    for sample in SAMPLE_USERS:
        if users.find_by_email(sample['email_address']) is not None:
            continue
        users.create({**sample, 'password': hash_password(sample['password'])})
        created_users += 1

    for sample in SAMPLE_COURSES:
        if courses.find_by_title(sample['title']) is not None:
            continue
        fields = {key: value for key, value in sample.items() if key != 'owner'}
        fields['user_id'] = users.find_by_email(sample['owner']).id
        courses.create(fields)
        created_courses += 1

    return created_users, created_courses


def main() -> None:
    init_schema()
    db = SessionLocal()
    try:
        created_users, created_courses = seed(db)
    finally:
        db.close()
    print(f'Seeded {created_users} users and {created_courses} courses')


if __name__ == "__main__":
    main()
