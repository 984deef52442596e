from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # JSON 用 camelCase，程式裡用 snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TimetableEntryCreate(CamelModel):
    # 全部 Optional：缺欄位要回 400 而不是 422
    semester_id: Optional[int] = None
    day: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class SemesterBriefOut(CamelModel):
    id: int
    subject_name: str
    subject_code: str
    semester_number: int


class TimetableEntryOut(CamelModel):
    id: int
    day: str
    start_time: str
    end_time: str
    semester: int


class TimetableEntryDetailOut(CamelModel):
    id: int
    day: str
    start_time: str
    end_time: str
    semester: Optional[SemesterBriefOut] = None


class StudentTimetableRowOut(CamelModel):
    id: int
    subject: str
    subject_code: str
    teacher: Optional[str] = None
    start_time: str
    end_time: str


class TimetableEnvelope(BaseModel):
    success: bool = True
    message: str


class TeacherTimetableOut(TimetableEnvelope):
    timetable: List[TimetableEntryDetailOut]


class TimetableEntryListOut(TimetableEnvelope):
    timetable: List[TimetableEntryOut]


class StudentTimetableOut(TimetableEnvelope):
    timetable: List[StudentTimetableRowOut]
