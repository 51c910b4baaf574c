# __init__.py
from jobly.schemas.auth import TokenData, TokenRequest, TokenResponse
from jobly.schemas.company import CompanyCreate, CompanyDetail, CompanyRead, CompanyUpdate
from jobly.schemas.job import JobCreate, JobDetail, JobRead, JobUpdate
from jobly.schemas.technology import TechnologyCreate, TechnologyRead, TechnologyUpdate
from jobly.schemas.user import UserCreate, UserDetail, UserRead, UserRegister, UserUpdate

__all__ = [
	"TokenData",
	"TokenRequest",
	"TokenResponse",
	"CompanyCreate",
	"CompanyDetail",
	"CompanyRead",
	"CompanyUpdate",
	"JobCreate",
	"JobDetail",
	"JobRead",
	"JobUpdate",
	"TechnologyCreate",
	"TechnologyRead",
	"TechnologyUpdate",
	"UserCreate",
	"UserDetail",
	"UserRead",
	"UserRegister",
	"UserUpdate",
]
