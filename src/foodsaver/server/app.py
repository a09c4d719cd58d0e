"""ASGI application for FoodSaver."""
# mypy: ignore-errors

from __future__ import annotations

import asyncio
import logging
from datetime import date, datetime
from time import perf_counter
from typing import Any, NoReturn, Optional
from uuid import uuid4

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from fastapi import Body, Depends, FastAPI, HTTPException, Path, Query, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from pydantic import BaseModel, EmailStr, Field, field_validator

from foodsaver import __version__, metrics
from foodsaver.alerts import ExpirationAlertSweeper
from foodsaver.config import Settings, get_settings
from foodsaver.logging_utils import configure_logging as configure_app_logging
from foodsaver.models.analytics import Analytics, WasteReport
from foodsaver.models.donation import Donation
from foodsaver.models.food import FoodCategory, FoodItem, StorageLocation
from foodsaver.models.food_bank import FoodBank
from foodsaver.models.notifications import ExpirationAlert, NotificationSettings
from foodsaver.models.recipe import Recipe, RecipeRecommendation
from foodsaver.models.user import AuthToken, User, UserType
from foodsaver.search import filter_nearby, recommend_recipes
from foodsaver.security import create_access_token
from foodsaver.server import deps

logger = logging.getLogger(__name__)

UNMATCHED_ROUTE_LABEL = "unmatched"


def _json_safe(value: Any) -> Any:
    """Convert non-serializable values into JSON-safe representations."""

    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        try:
            return value.decode("utf-8")
        except UnicodeDecodeError:
            return value.hex()
    if isinstance(value, (list, tuple)):
        return [_json_safe(entry) for entry in value]
    if isinstance(value, dict):
        return {key: _json_safe(sub_value) for key, sub_value in value.items()}
    return repr(value)


def _normalize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Ensure validation error payloads can be serialized to JSON."""

    normalized: list[dict[str, Any]] = []
    for error in errors:
        normalized.append({key: _json_safe(value) for key, value in error.items()})
    return normalized


def _raise_domain_error(exc: ValueError) -> NoReturn:
    """Translate a data-access ``ValueError`` into a 404 or 400 response."""

    message = str(exc)
    if "not found" in message.lower():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=message) from exc
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from exc


def _route_label(request: Request) -> str:
    """Return the matched route template so metric labels stay bounded."""

    route = request.scope.get("route")
    template = getattr(route, "path", None)
    return template if template else UNMATCHED_ROUTE_LABEL


def _configure_logging(settings: Settings) -> None:
    configure_app_logging(settings.log_level, settings.log_format, [settings.jwt_secret])


def _issue_token(user: User, settings: Settings) -> AuthToken:
    token = create_access_token(user.id, user.email)
    return AuthToken(
        access_token=token,
        expires_in=settings.jwt_expires_minutes * 60,
        user=user,
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application instance."""

    settings = get_settings()
    _configure_logging(settings)
    if settings.uses_development_secret:
        logger.warning(
            "FOODSAVER_JWT_SECRET is not set; tokens are signed with the development secret"
        )

    application = FastAPI(title="FoodSaver", version=__version__)

    if settings.alert_sweep_enabled:
        sweeper = ExpirationAlertSweeper()
        alert_scheduler = AsyncIOScheduler()
        alert_scheduler.add_job(
            sweeper.sweep_once,
            "interval",
            seconds=settings.alert_sweep_interval,
            max_instances=1,
            coalesce=True,
        )

        @application.on_event("startup")
        async def start_alert_sweep() -> None:
            await asyncio.to_thread(sweeper.sweep_once)
            alert_scheduler.start()

        @application.on_event("shutdown")
        async def stop_alert_sweep() -> None:
            alert_scheduler.shutdown(wait=False)

    logger.debug("Application created with log level %s", settings.log_level)

    if settings.log_requests:
        access_logger = logging.getLogger("foodsaver.access")

        @application.middleware("http")
        async def log_request_response(request: Request, call_next):
            """Log request/response details without leaking sensitive data."""

            request_id = request.headers.get("X-Request-ID") or uuid4().hex
            request.state.request_id = request_id
            start = perf_counter()
            path = request.url.path
            method = request.method
            try:
                response: Response = await call_next(request)
            except Exception:
                duration_ms = (perf_counter() - start) * 1000
                access_logger.exception(
                    "HTTP %s %s status=500 duration_ms=%.2f",
                    method,
                    path,
                    duration_ms,
                    extra={"request_id": request_id},
                )
                route_label = _route_label(request)
                metrics.REQUEST_COUNT.labels(method=method, path=route_label, status="500").inc()
                metrics.REQUEST_LATENCY.labels(method=method, path=route_label).observe(
                    duration_ms / 1000.0
                )
                raise

            duration_ms = (perf_counter() - start) * 1000
            response.headers.setdefault("X-Request-ID", request_id)
            access_logger.info(
                "HTTP %s %s status=%s duration_ms=%.2f",
                method,
                path,
                response.status_code,
                duration_ms,
                extra={"request_id": request_id},
            )
            route_label = _route_label(request)
            metrics.REQUEST_COUNT.labels(
                method=method,
                path=route_label,
                status=str(response.status_code),
            ).inc()
            metrics.REQUEST_LATENCY.labels(method=method, path=route_label).observe(
                duration_ms / 1000.0
            )
            return response

    @application.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        body_preview: str | None = None
        try:
            raw_body = await request.body()
            if raw_body:
                decoded = raw_body.decode("utf-8", errors="replace")
                if len(decoded) > 2048:
                    decoded = decoded[:2048] + "...(truncated)"
                body_preview = decoded
        except Exception:  # pragma: no cover - body already consumed
            body_preview = "<unable to read body>"

        log_kwargs: dict[str, Any] = {}
        request_id = getattr(request.state, "request_id", None)
        if request_id:
            log_kwargs["extra"] = {"request_id": request_id}

        # Rejected inputs may hold passwords; the body preview goes through redaction instead.
        logged_errors = [
            {key: value for key, value in error.items() if key != "input"}
            for error in exc.errors()
        ]
        logger.warning(
            "Validation error on %s %s: %s | body=%s",
            request.method,
            request.url.path,
            logged_errors,
            body_preview,
            **log_kwargs,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Validation failed",
                "details": _normalize_validation_errors(exc.errors()),
            },
        )

    @application.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error on %s %s",
            request.method,
            request.url.path,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    # Auth

    @application.post(
        "/auth/register",
        response_model=AuthToken,
        status_code=status.HTTP_201_CREATED,
        summary="Register a new account",
    )
    def register(
        payload: RegisterRequest,
        registrar: deps.UserRegistrar = Depends(deps.get_user_registrar),
    ) -> AuthToken:
        try:
            user = registrar(payload.model_dump())
        except ValueError as exc:
            _raise_domain_error(exc)
        return _issue_token(user, get_settings())

    @application.post("/auth/login", response_model=AuthToken, summary="Log in")
    def login(
        payload: LoginRequest,
        authenticator: deps.UserAuthenticator = Depends(deps.get_user_authenticator),
    ) -> AuthToken:
        user = authenticator(payload.email, payload.password)
        if user is None:
            logger.info("Failed login attempt")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
            )
        return _issue_token(user, get_settings())

    @application.get("/auth/me", response_model=User, summary="Current user")
    def me(user: User = Depends(deps.get_current_user)) -> User:
        return user

    @application.post("/auth/upgrade", response_model=User, summary="Upgrade to premium")
    def upgrade(
        user: User = Depends(deps.get_current_user),
        upgrader: deps.SubscriptionUpgrader = Depends(deps.get_subscription_upgrader),
    ) -> User:
        try:
            upgraded = upgrader(user.id)
        except ValueError as exc:
            _raise_domain_error(exc)
        logger.info("Upgraded user id=%s to premium", user.id, extra={"user_id": user.id})
        return upgraded

    # Food items

    @application.get("/food-items", response_model=list[FoodItem], summary="List food items")
    def food_items_list(
        user: User = Depends(deps.get_current_user),
        provider: deps.FoodItemProvider = Depends(deps.get_food_item_provider),
    ) -> list[FoodItem]:
        return provider(user.id)

    @application.post(
        "/food-items",
        response_model=FoodItem,
        status_code=status.HTTP_201_CREATED,
        summary="Create food item",
    )
    def food_items_create(
        payload: FoodItemCreateRequest,
        user: User = Depends(deps.get_current_user),
        creator: deps.FoodItemCreator = Depends(deps.get_food_item_creator),
    ) -> FoodItem:
        create_payload = payload.model_dump()
        logger.debug("Creating food item payload=%s", create_payload)
        return creator(user.id, create_payload)

    @application.get(
        "/food-items/expiring/{days}",
        response_model=list[FoodItem],
        summary="List items expiring soon",
    )
    def food_items_expiring(
        days: int = Path(ge=0, le=365),
        user: User = Depends(deps.get_current_user),
        provider: deps.ExpiringItemsProvider = Depends(deps.get_expiring_items_provider),
    ) -> list[FoodItem]:
        return provider(user.id, days)

    @application.get("/food-items/{item_id}", response_model=FoodItem, summary="Get food item")
    def food_items_get(
        item_id: str,
        user: User = Depends(deps.get_current_user),
        fetcher: deps.FoodItemFetcher = Depends(deps.get_food_item_fetcher),
    ) -> FoodItem:
        item = fetcher(user.id, item_id)
        if item is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Food item not found")
        return item

    @application.put("/food-items/{item_id}", response_model=FoodItem, summary="Update food item")
    def food_items_update(
        item_id: str,
        payload: FoodItemUpdateRequest,
        user: User = Depends(deps.get_current_user),
        updater: deps.FoodItemUpdater = Depends(deps.get_food_item_updater),
    ) -> FoodItem:
        try:
            return updater(user.id, item_id, payload.model_dump(exclude_unset=True))
        except ValueError as exc:
            _raise_domain_error(exc)

    @application.delete(
        "/food-items/{item_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        summary="Delete food item",
    )
    def food_items_delete(
        item_id: str,
        user: User = Depends(deps.get_current_user),
        deleter: deps.FoodItemDeleter = Depends(deps.get_food_item_deleter),
    ) -> Response:
        try:
            deleter(user.id, item_id)
        except ValueError as exc:
            _raise_domain_error(exc)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @application.post(
        "/food-items/{item_id}/consume",
        response_model=FoodItem,
        summary="Consume food item",
    )
    def food_items_consume(
        item_id: str,
        payload: Optional[ConsumeRequest] = Body(default=None),
        user: User = Depends(deps.get_current_user),
        consumer: deps.FoodItemConsumer = Depends(deps.get_food_item_consumer),
    ) -> FoodItem:
        quantity = payload.quantity if payload is not None else None
        try:
            return consumer(user.id, item_id, quantity)
        except ValueError as exc:
            _raise_domain_error(exc)

    # Recipes

    @application.get("/recipes", response_model=list[Recipe], summary="List recipes")
    def recipes_list(
        user: Optional[User] = Depends(deps.get_optional_user),
        provider: deps.RecipeProvider = Depends(deps.get_recipe_provider),
    ) -> list[Recipe]:
        return provider()

    @application.get(
        "/recipes/recommendations",
        response_model=list[RecipeRecommendation],
        summary="Recommend recipes from on-hand items",
    )
    def recipes_recommendations(
        user: Optional[User] = Depends(deps.get_optional_user),
        provider: deps.RecipeProvider = Depends(deps.get_recipe_provider),
        ingredients: deps.IngredientProvider = Depends(deps.get_ingredient_provider),
    ) -> list[RecipeRecommendation]:
        if user is None:
            return []
        available = ingredients(user.id)
        recommendations = recommend_recipes(provider(), available)
        logger.debug(
            "Recommendations user_id=%s available=%s matches=%s",
            user.id,
            len(available),
            len(recommendations),
        )
        return recommendations

    @application.get("/recipes/{recipe_id}", response_model=Recipe, summary="Get recipe")
    def recipes_get(
        recipe_id: str,
        fetcher: deps.RecipeFetcher = Depends(deps.get_recipe_fetcher),
    ) -> Recipe:
        recipe = fetcher(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Recipe not found")
        return recipe

    # Donations

    @application.get("/donations", response_model=list[Donation], summary="List donations")
    def donations_list(
        user: User = Depends(deps.get_current_user),
        provider: deps.DonationProvider = Depends(deps.get_donation_provider),
    ) -> list[Donation]:
        return provider(user.id)

    @application.post(
        "/donations",
        response_model=Donation,
        status_code=status.HTTP_201_CREATED,
        summary="Create donation",
    )
    def donations_create(
        payload: DonationCreateRequest,
        user: User = Depends(deps.get_current_user),
        creator: deps.DonationCreator = Depends(deps.get_donation_creator),
    ) -> Donation:
        try:
            return creator(user.id, payload.model_dump())
        except ValueError as exc:
            _raise_domain_error(exc)

    @application.put(
        "/donations/{donation_id}/status",
        response_model=Donation,
        summary="Update donation status",
    )
    def donations_update_status(
        donation_id: str,
        payload: DonationStatusRequest,
        user: User = Depends(deps.get_current_user),
        updater: deps.DonationStatusUpdater = Depends(deps.get_donation_status_updater),
    ) -> Donation:
        try:
            return updater(user.id, donation_id, payload.status)
        except ValueError as exc:
            _raise_domain_error(exc)

    # Food banks

    @application.get("/food-banks", response_model=list[FoodBank], summary="Search food banks")
    def food_banks_search(
        search: Optional[str] = Query(default=None, max_length=255),
        country: Optional[str] = Query(default=None, max_length=255),
        city: Optional[str] = Query(default=None, max_length=255),
        searcher: deps.FoodBankSearcher = Depends(deps.get_food_bank_searcher),
    ) -> list[FoodBank]:
        return searcher(search, country, city)

    @application.get(
        "/food-banks/nearby",
        response_model=list[FoodBank],
        summary="Find food banks near a point",
    )
    def food_banks_nearby(
        lat: float = Query(ge=-90, le=90),
        lng: float = Query(ge=-180, le=180),
        radius: Optional[float] = Query(default=None, gt=0),
        provider: deps.LocatedFoodBankProvider = Depends(deps.get_located_food_bank_provider),
    ) -> list[FoodBank]:
        radius_km = radius if radius is not None else get_settings().nearby_default_radius_km
        return filter_nearby(provider(), lat, lng, radius_km)

    # Analytics

    @application.get("/analytics", response_model=Analytics, summary="Inventory analytics")
    def analytics_overview(
        user: User = Depends(deps.get_current_user),
        provider: deps.AnalyticsProvider = Depends(deps.get_analytics_provider),
    ) -> Analytics:
        return provider(user.id)

    @application.get(
        "/analytics/waste-report",
        response_model=WasteReport,
        summary="Items that expired unconsumed",
    )
    def analytics_waste_report(
        period: int = Query(default=30, ge=1, le=3650),
        user: User = Depends(deps.get_current_user),
        provider: deps.WasteReportProvider = Depends(deps.get_waste_report_provider),
    ) -> WasteReport:
        return provider(user.id, period)

    # Notifications

    @application.get(
        "/notification-settings",
        response_model=NotificationSettings,
        summary="Get notification settings",
    )
    def notification_settings_get(
        user: User = Depends(deps.get_current_user),
        provider: deps.NotificationSettingsProvider = Depends(
            deps.get_notification_settings_provider
        ),
    ) -> NotificationSettings:
        return provider(user.id)

    @application.put(
        "/notification-settings",
        response_model=NotificationSettings,
        summary="Update notification settings",
    )
    def notification_settings_update(
        payload: NotificationSettingsUpdateRequest,
        user: User = Depends(deps.get_current_user),
        saver: deps.NotificationSettingsSaver = Depends(deps.get_notification_settings_saver),
    ) -> NotificationSettings:
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None
        }
        try:
            return saver(user.id, changes)
        except ValueError as exc:
            _raise_domain_error(exc)

    @application.get(
        "/notifications/expiring",
        response_model=ExpirationAlert,
        summary="Expiration alert for the caller",
    )
    def notifications_expiring(
        user: User = Depends(deps.get_current_user),
        settings_provider: deps.NotificationSettingsProvider = Depends(
            deps.get_notification_settings_provider
        ),
        alert_provider: deps.ExpirationAlertProvider = Depends(deps.get_expiration_alert_provider),
    ) -> ExpirationAlert:
        preferences = settings_provider(user.id)
        return ExpirationAlert(
            user_id=user.id,
            email=user.email,
            generated_on=date.today(),
            days_ahead=preferences.alert_days_before,
            items=alert_provider(user.id),
        )

    # Operational

    @application.get("/health", summary="Health check")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    @application.get("/metrics", include_in_schema=False)
    def metrics_endpoint() -> Response:
        payload = generate_latest()
        return Response(content=payload, media_type=CONTENT_TYPE_LATEST)

    return application


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=2, max_length=255)
    user_type: UserType = Field(default="household")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class FoodItemCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    category: FoodCategory
    quantity: float = Field(ge=0.1)
    unit: str = Field(min_length=1, max_length=64)
    purchase_date: date
    expiration_date: date
    storage_location: StorageLocation
    cost: Optional[float] = Field(default=None, ge=0)
    barcode: Optional[str] = Field(default=None, max_length=64)

    @field_validator("name", "unit", mode="before")
    @classmethod
    def strip_text(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class FoodItemUpdateRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    category: Optional[FoodCategory] = None
    quantity: Optional[float] = Field(default=None, ge=0)
    unit: Optional[str] = Field(default=None, min_length=1, max_length=64)
    purchase_date: Optional[date] = None
    expiration_date: Optional[date] = None
    storage_location: Optional[StorageLocation] = None
    cost: Optional[float] = Field(default=None, ge=0)
    barcode: Optional[str] = Field(default=None, max_length=64)
    is_consumed: Optional[bool] = None
    consumed_at: Optional[datetime] = None


class ConsumeRequest(BaseModel):
    quantity: Optional[float] = Field(default=None, ge=0)


class DonationCreateRequest(BaseModel):
    food_item_ids: list[str] = Field(min_length=1)
    recipient_organization: str = Field(min_length=1, max_length=255)
    pickup_date: datetime
    notes: Optional[str] = Field(default=None, max_length=2000)

    @field_validator("recipient_organization", mode="before")
    @classmethod
    def strip_recipient(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class DonationStatusRequest(BaseModel):
    status: str = Field(min_length=1)


class NotificationSettingsUpdateRequest(BaseModel):
    expiration_alerts: Optional[bool] = None
    alert_days_before: Optional[int] = Field(default=None, ge=0, le=30)
    recipe_recommendations: Optional[bool] = None
    donation_reminders: Optional[bool] = None
    weekly_reports: Optional[bool] = None


app = create_app()

__all__ = ["app", "create_app"]
