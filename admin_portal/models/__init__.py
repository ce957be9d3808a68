from .user import User
from .password_reset import PasswordResetToken
from .category import Category
from .blog import Blog
from .portfolio import Portfolio, Screenshot
from .service import Service
from .team import Team, Testimonial
from .use_case import UseCase
from .media import Media
from .settings import Setting

__all__ = [
    "User",
    "PasswordResetToken",
    "Category",
    "Blog",
    "Portfolio",
    "Screenshot",
    "Service",
    "Team",
    "Testimonial",
    "UseCase",
    "Media",
    "Setting",
]
