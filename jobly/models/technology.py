# technology.py
from sqlalchemy import Column, Integer, Text
from jobly.database import Base


class Technology(Base):
    __tablename__ = "technologies"

    id = Column(Integer, primary_key=True, autoincrement=True)
    technology = Column(Text, unique=True, nullable=False)
