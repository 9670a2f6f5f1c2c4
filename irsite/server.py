"""FastAPI server – renders tenant investor-relations pages.

Run with:
    python -m irsite.main
    # → http://localhost:8000/health
    # → http://localhost:8000/sites/ACM
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from markupsafe import escape
from sqlalchemy.ext.asyncio import AsyncSession

from irsite.composition.clusters import CAPITAL_MARKETS_HUB
from irsite.config import settings
from irsite.db import get_session
from irsite.layouts import LAYOUTS, CapitalMarketsHubLayout
from irsite.middleware.security import SecurityHeadersMiddleware, parse_cors_origins
from irsite.models.company import Company
from irsite.services import site_service

logger = logging.getLogger("irsite.server")

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
</head>
<body style="margin: 0;">
{body}
</body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Site server starting (env=%s)", settings.app_env)
    yield
    logger.info("Site server shutting down")


app = FastAPI(
    title="IR Site Builder",
    description="Renders multi-tenant investor-relations pages.",
    version=settings.site_server_version,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_cors_origins(settings.allowed_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)


async def _company_or_404(session: AsyncSession, ticker: str) -> Company:
    company = await site_service.get_site_by_ticker(session, ticker)
    if company is None:
        raise HTTPException(status_code=404, detail=f"No site found for ticker '{ticker}'")
    return company


def _layout_for(company: Company, session: AsyncSession) -> CapitalMarketsHubLayout:
    """Pick the layout registered for the company's template type.

    Companies without a template render the Capital Markets Hub.
    """
    layout_key = company.template.template_type if company.template else CAPITAL_MARKETS_HUB
    layout_cls = LAYOUTS.get(layout_key)
    if layout_cls is None:
        raise HTTPException(status_code=404, detail=f"No layout for template type '{layout_key}'")
    return layout_cls(session=session, use_cms=settings.use_cms)


# ── Health ────────────────────────────────────────────────────────────────────


@app.get("/health")
async def health():
    return {"status": "ok", "version": settings.site_server_version}


# ── Sites ─────────────────────────────────────────────────────────────────────


@app.get("/sites/{ticker}", response_class=HTMLResponse)
async def render_site(ticker: str, session: AsyncSession = Depends(get_session)):
    company = await _company_or_404(session, ticker)
    layout = _layout_for(company, session)
    body = await layout.render(company, company.template, company.theme)
    return HTMLResponse(PAGE_TEMPLATE.format(title=escape(company.name), body=body))


@app.get("/sites/{ticker}/component-data")
async def site_component_data(ticker: str, session: AsyncSession = Depends(get_session)):
    company = await _company_or_404(session, ticker)
    layout = _layout_for(company, session)
    data = await layout.build_component_data(company)
    return data.model_dump(mode="json")
