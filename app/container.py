"""
Container — creates and holds singletons.

Provides:
- Settings
- AnswerService (parse -> match -> compose -> brand voice)

Everything held here is stateless between requests; the container only
exists so routes can reach configured objects via routes.get_container().
"""

from __future__ import annotations
from dataclasses import dataclass

from app.config import Settings
from service.answer_service import AnswerService
from service.rewriter import Stylist


@dataclass
class Container:
    settings: Settings

    def __post_init__(self):
        self.stylist = Stylist()
        self.answers = AnswerService(settings=self.settings, stylist=self.stylist)
