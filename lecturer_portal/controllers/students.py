from lecturer_portal.controllers.base import ListScreen
from lecturer_portal.repositories.students import StudentRepository


class StudentsScreen(ListScreen):
    repository_class = StudentRepository
    noun = "student"
    plural = "students"
    created_title = "Student added successfully"
    updated_title = "Student updated successfully"
    deleted_title = "Student deleted successfully"
