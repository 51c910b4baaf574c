# relations.py
"""Association tables. Each pair is the primary key, so duplicates hit a unique violation."""

from sqlalchemy import Column, ForeignKey, Integer, String
from jobly.database import Base


class Requirement(Base):
    __tablename__ = "requirements"

    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True, index=True)


class Qualification(Base):
    __tablename__ = "qualifications"

    username = Column(String(25), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True)
    tech_id = Column(Integer, ForeignKey("technologies.id", ondelete="CASCADE"), primary_key=True)


class Application(Base):
    __tablename__ = "applications"

    username = Column(String(25), ForeignKey("users.username", ondelete="CASCADE"), primary_key=True)
    job_id = Column(Integer, ForeignKey("jobs.id", ondelete="CASCADE"), primary_key=True)
