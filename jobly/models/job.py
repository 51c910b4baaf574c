# job.py
from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, String, Text
from jobly.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    salary = Column(Integer, nullable=True)
    # Exact decimal; accessors bind and return it as a string. sqlite would coerce a
    # NUMERIC value to REAL, so it keeps the decimal text instead.
    equity = Column(Numeric().with_variant(String(40), "sqlite"), nullable=True)
    company_handle = Column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        CheckConstraint(
            "CAST(equity AS NUMERIC) >= 0 AND CAST(equity AS NUMERIC) < 1",
            name="ck_jobs_equity",
        ),
    )
