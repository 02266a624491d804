from dataclasses import dataclass
from typing import Callable, Optional

from competitions.models import Competition
from credential.models import Credential, CredentialStatus, Position

from .models import BadgeType

# 触发事件
COMPETITION_JOIN = 'COMPETITION_JOIN'
COMPETITION_SUBMISSION = 'COMPETITION_SUBMISSION'
VERIFICATION = 'VERIFICATION'


def participation_count(user):
    return Credential.objects.filter(user=user).count()


def champion_count(user):
    return Credential.objects.filter(user=user, position=Position.CHAMPION).count()


def submitted_competition_count(user):
    return Competition.objects.filter(submitted_by=user).count()


def verified_count(user):
    return Credential.objects.filter(user=user, status=CredentialStatus.APPROVED).count()


@dataclass(frozen=True)
class BadgeRule:
    slug: str
    name: str
    description: str
    icon_url: str
    badge_type: str
    counter: Callable
    requirement: Optional[int] = None

    @property
    def threshold(self):
        return self.requirement or 1

    def progress(self, user):
        return self.counter(user)

    def is_satisfied(self, user):
        return self.progress(user) >= self.threshold


BADGE_RULES = [
    BadgeRule('competition_starter', 'Competition Starter', 'Participated in your first competition',
              '/badges/first-competition.svg', BadgeType.PARTICIPATION, participation_count, 1),
    BadgeRule('competition_enthusiast', 'Competition Enthusiast', 'Participated in 5 competitions',
              '/badges/five-competitions.svg', BadgeType.PARTICIPATION, participation_count, 5),
    BadgeRule('competition_veteran', 'Competition Veteran', 'Participated in 25 competitions',
              '/badges/veteran.svg', BadgeType.COMPETITION_MILESTONE, participation_count, 25),
    BadgeRule('competition_legend', 'Competition Legend', 'Participated in 50 competitions',
              '/badges/legend.svg', BadgeType.COMPETITION_MILESTONE, participation_count, 50),
    BadgeRule('champion', 'Champion', 'Won your first competition',
              '/badges/champion.svg', BadgeType.SPECIAL_ACHIEVEMENT, champion_count),
    BadgeRule('multiple_champion', 'Multiple Champion', 'Won 5 competitions',
              '/badges/multiple-champion.svg', BadgeType.SPECIAL_ACHIEVEMENT, champion_count, 5),
    BadgeRule('finder', 'Event Finder', 'Submitted your first competition for review',
              '/badges/organizer.svg', BadgeType.SPECIAL_ACHIEVEMENT, submitted_competition_count),
    BadgeRule('verified_cosplayer', 'Verified Cosplayer', 'Had your first competition result verified by an admin',
              '/badges/verified.svg', BadgeType.SPECIAL_ACHIEVEMENT, verified_count),
]
