#!/usr/bin/env python3
"""Seed script – populates the database with demo investor-relations tenants.

Run after migrations:
    python -m scripts.seed
"""

from __future__ import annotations

import random
import uuid
from datetime import timedelta

from faker import Faker
from sqlalchemy import create_engine
from sqlalchemy.orm import Session

from irsite.config import settings
from irsite.models import Base, CmsEntry, Company, Leader, PressRelease, Template, Theme

fake = Faker()
Faker.seed(42)
random.seed(42)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

THEMES = [
    (
        "Midnight Gold",
        {"primary": "#0A0A0A", "accent": "#F5C55A", "background": "#0F0F0F", "text": "#FFFFFF"},
        {"primaryFont": "IBM Plex Sans", "secondaryFont": "IBM Plex Serif"},
    ),
    (
        "Harbour Blue",
        {"primary": "#0B2545", "accent": "#8DA9C4", "background": "#F7F9FB", "text": "#13315C"},
        {"primaryFont": "Inter"},
    ),
    # Colours only – fonts fall back to the company brand fonts
    ("Plain", {"accent": "#2E7D32"}, None),
]

LEADER_TITLES = [
    "Managing Partner",
    "Chief Investment Officer",
    "Head of Research",
    "Chief Financial Officer",
    "Head of Investor Relations",
]

TICKERS: list[str] = []
_used: set[str] = set()
while len(TICKERS) < 5:
    t = fake.lexify(text="???", letters="ABCDEFGHIJKLMNOPQRSTUVWXYZ").upper()
    if t not in _used:
        _used.add(t)
        TICKERS.append(t)


# ---------------------------------------------------------------------------
# Seed functions
# ---------------------------------------------------------------------------


def seed_themes(session: Session) -> list[Theme]:
    themes = [
        Theme(id=uuid.uuid4(), name=name, colors=colors, typography=typography)
        for name, colors, typography in THEMES
    ]
    session.add_all(themes)
    session.flush()
    return themes


def seed_template(session: Session) -> Template:
    template = Template(
        id=uuid.uuid4(),
        name="Capital Markets Hub",
        template_type="capital-markets-hub",
        config={"hiddenComponents": []},
    )
    session.add(template)
    session.flush()
    return template


def seed_companies(session: Session, themes: list[Theme], template: Template) -> list[Company]:
    """Create one company per ticker, each with a random theme."""
    companies: list[Company] = []
    for ticker in TICKERS:
        name = f"{fake.last_name()} Capital"
        company = Company(
            id=uuid.uuid4(),
            slug=name.lower().replace(" ", "-"),
            name=name,
            ticker_symbol=ticker,
            logo_url=f"https://logo.example.com/{ticker.lower()}.png" if random.random() > 0.3 else None,
            description=fake.paragraph(nb_sentences=2),
            website_url=f"https://www.{ticker.lower()}-capital.example.com",
            contact_email=f"ir@{ticker.lower()}-capital.example.com",
            market_cap=round(random.uniform(500_000_000, 50_000_000_000), 2),
            primary_font_family=random.choice(["Source Sans Pro", None]),
            theme_id=random.choice(themes).id,
            template_id=template.id,
        )
        session.add(company)
        companies.append(company)
    session.flush()
    return companies


def seed_press_releases(session: Session, companies: list[Company]) -> int:
    count = 0
    for comp in companies:
        published = fake.date_between(start_date="-1y", end_date="today")
        for _ in range(random.randint(3, 6)):
            session.add(
                PressRelease(
                    id=uuid.uuid4(),
                    company_id=comp.id,
                    title=fake.sentence(nb_words=8).rstrip("."),
                    summary=fake.paragraph(nb_sentences=2),
                    url=f"{comp.website_url}/news/{fake.slug()}",
                    published_at=published,
                )
            )
            published -= timedelta(days=random.randint(7, 45))
            count += 1
    session.flush()
    return count


def seed_leaders(session: Session, companies: list[Company]) -> int:
    count = 0
    for comp in companies:
        for order, title in enumerate(random.sample(LEADER_TITLES, k=3)):
            session.add(
                Leader(
                    id=uuid.uuid4(),
                    company_id=comp.id,
                    name=fake.name(),
                    title=title,
                    bio=fake.paragraph(nb_sentences=2),
                    sort_order=order,
                )
            )
            count += 1
    session.flush()
    return count


def seed_cms_entries(session: Session, companies: list[Company]) -> int:
    """Give every other company a CMS hero override."""
    count = 0
    for comp in companies[::2]:
        session.add(
            CmsEntry(
                id=uuid.uuid4(),
                company_id=comp.id,
                section="hero",
                payload={
                    "headline": fake.catch_phrase(),
                    "subheadline": fake.sentence(nb_words=14),
                },
            )
        )
        count += 1
    session.flush()
    return count


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    print("🌱  Seeding database …")
    engine = create_engine(settings.database_url_sync, echo=False)

    # Create all tables (fallback if migrations haven't run)
    Base.metadata.create_all(engine)

    with Session(engine) as session:
        # Wipe existing data
        for table in reversed(Base.metadata.sorted_tables):
            session.execute(table.delete())
        session.commit()

        themes = seed_themes(session)
        template = seed_template(session)
        companies = seed_companies(session, themes, template)
        print(f"  ✅ {len(companies)} companies ({', '.join(TICKERS)})")

        n_pr = seed_press_releases(session, companies)
        print(f"  ✅ {n_pr} press releases")

        n_ld = seed_leaders(session, companies)
        print(f"  ✅ {n_ld} leaders")

        n_cms = seed_cms_entries(session, companies)
        print(f"  ✅ {n_cms} CMS entries")

        session.commit()

    print("🎉  Seeding complete!")


if __name__ == "__main__":
    main()
