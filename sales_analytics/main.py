from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from sales_analytics.config import settings
from sales_analytics.engine import analyze_sales_data
from sales_analytics.errors import InvalidInputError, MissingConfigurationError
from sales_analytics.logger import get_logger
from sales_analytics.models import AnalysisOptions, SalesDataset
from sales_analytics.store import store
from sales_analytics.strategies import calculate_bonus_by_profit

logger = get_logger(__name__)

# the service always states its bonus policy; revenue uses the default
REPORT_OPTIONS = AnalysisOptions(calculate_bonus=calculate_bonus_by_profit)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DATASET_PATH:
        logger.info("Loading dataset from %s", settings.DATASET_PATH)
        store.load_dataset(settings.DATASET_PATH)
    elif settings.SEED_ON_STARTUP:
        # Auto-seed on startup so the service is immediately usable
        from scripts.seed_data import seed
        seed(store)
    yield


app = FastAPI(
    title="Sales Analytics Service",
    version="1.0.0",
    description="Seller revenue, profit and bonus reporting",
    lifespan=lifespan,
)


def _run_report(dataset: SalesDataset):
    try:
        return analyze_sales_data(dataset, REPORT_OPTIONS, settings.TOP_PRODUCTS_LIMIT)
    except InvalidInputError as exc:
        raise HTTPException(422, str(exc))
    except MissingConfigurationError as exc:
        raise HTTPException(400, str(exc))


# ── Reference data ───────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


@app.get("/api/v1/sellers/{seller_id}", summary="Get seller details")
def get_seller(seller_id: str):
    seller = store.get_seller(seller_id)
    if not seller:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    return seller.model_dump()


@app.get("/api/v1/products", summary="List the product catalog")
def list_products():
    return {"products": [p.model_dump() for p in store.list_products()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sales", summary="Sales performance for every seller")
def get_sales_report():
    results = _run_report(store.snapshot())
    return {"sellers": [r.model_dump() for r in results]}


@app.get("/api/v1/reports/sales/{seller_id}", summary="Sales performance for one seller")
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    results = _run_report(store.snapshot())
    for rank, result in enumerate(results):
        if result.seller_id == seller_id:
            return {"rank": rank, **result.model_dump()}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/reports/sales", summary="Sales performance for a posted dataset")
def post_sales_report(dataset: SalesDataset):
    results = _run_report(dataset)
    return {"sellers": [r.model_dump() for r in results]}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed test data")
def reseed():
    from scripts.seed_data import seed
    store.clear()
    seed(store)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
