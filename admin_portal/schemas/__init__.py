from .auth import SignUpRequest, SignInRequest, InviteRequest, TokenRequest, SetPasswordRequest, UserResponse, UserUpdate
from .category import CategoryCreate, CategoryUpdate, CategoryResponse
from .blog import BlogCreate, BlogUpdate, BlogResponse
from .portfolio import PortfolioCreate, PortfolioUpdate, PortfolioResponse
from .service import ServiceCreate, ServiceUpdate, ServiceResponse
from .people import PersonCreate, PersonUpdate, PersonResponse
from .use_case import UseCaseCreate, UseCaseUpdate, UseCaseResponse
from .media import MediaCreate, MediaUpdate, MediaResponse
from .settings import SettingCreate, SettingUpdate, SettingResponse

__all__ = [
    "SignUpRequest", "SignInRequest", "InviteRequest", "TokenRequest", "SetPasswordRequest",
    "UserResponse", "UserUpdate",
    "CategoryCreate", "CategoryUpdate", "CategoryResponse",
    "BlogCreate", "BlogUpdate", "BlogResponse",
    "PortfolioCreate", "PortfolioUpdate", "PortfolioResponse",
    "ServiceCreate", "ServiceUpdate", "ServiceResponse",
    "PersonCreate", "PersonUpdate", "PersonResponse",
    "UseCaseCreate", "UseCaseUpdate", "UseCaseResponse",
    "MediaCreate", "MediaUpdate", "MediaResponse",
    "SettingCreate", "SettingUpdate", "SettingResponse",
]
