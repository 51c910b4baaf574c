# __init__.py
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.relations import Application, Qualification, Requirement
from jobly.models.technology import Technology
from jobly.models.user import User

__all__ = [
	"Application",
	"Company",
	"Job",
	"Qualification",
	"Requirement",
	"Technology",
	"User",
]
