import uuid

from fastapi import APIRouter, Depends, File, Response, UploadFile

from lecturer_portal.client import PortalClient
from lecturer_portal.repositories.students import StudentRepository
from lecturer_portal.schemas.common import DeletedOut
from lecturer_portal.schemas.student import StudentCreate, StudentImportOut, StudentOut, StudentUpdate
from lecturer_portal.utils.auth import get_client, get_current_identity
from lecturer_portal.utils.excel_export import make_filename, students_to_xlsx_bytes
from lecturer_portal.utils.excel_import import read_roster

router = APIRouter(prefix="/students", tags=["Students"])

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@router.get("", response_model=list[StudentOut])
def list_students(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return StudentRepository(client).list(me)


@router.post("", response_model=StudentOut, status_code=201)
def create_student(body: StudentCreate, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return StudentRepository(client).create(me, body)


# roster import / export
@router.post("/import", response_model=StudentImportOut)
def import_students(
    file: UploadFile = File(...),
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    rows = read_roster(file.file)
    return StudentRepository(client).import_rows(me, rows)


@router.get("/export")
def export_students(client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    data = students_to_xlsx_bytes(StudentRepository(client).list(me))
    filename = make_filename("students")
    return Response(
        content=data,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/{student_pk}", response_model=StudentOut)
def get_student(student_pk: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    return StudentRepository(client).get(student_pk)


@router.put("/{student_pk}", response_model=StudentOut)
def update_student(
    student_pk: uuid.UUID,
    body: StudentUpdate,
    client: PortalClient = Depends(get_client),
    me=Depends(get_current_identity),
):
    return StudentRepository(client).update(student_pk, body)


@router.delete("/{student_pk}", response_model=DeletedOut)
def delete_student(student_pk: uuid.UUID, client: PortalClient = Depends(get_client), me=Depends(get_current_identity)):
    StudentRepository(client).delete(student_pk)
    return DeletedOut()
