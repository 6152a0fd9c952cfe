"""
Query Templates

Static catalogue of starter prompts grouped by category.
"""

from pydantic import BaseModel


class QueryTemplate(BaseModel):
    """A starter natural-language prompt."""

    id: str
    name: str
    description: str
    category: str
    prompt: str


QUERY_TEMPLATES: list[QueryTemplate] = [
    QueryTemplate(
        id="pagination-offset",
        name="Pagination with Offset",
        description="Basic pagination using LIMIT and OFFSET",
        category="Pagination",
        prompt="Get page 2 of users with 10 items per page",
    ),
    QueryTemplate(
        id="pagination-cursor",
        name="Cursor-based Pagination",
        description="Efficient pagination using cursor/keyset",
        category="Pagination",
        prompt="Get next 10 users after user ID 100 ordered by created_at",
    ),
    QueryTemplate(
        id="search-like",
        name="Text Search (LIKE)",
        description="Basic text search with wildcards",
        category="Search",
        prompt='Search products where name contains "phone"',
    ),
    QueryTemplate(
        id="search-fulltext",
        name="Full-text Search",
        description="Advanced full-text search",
        category="Search",
        prompt='Full-text search for "wireless headphones" in product name and description',
    ),
    QueryTemplate(
        id="agg-count-group",
        name="Count with Group By",
        description="Count records grouped by category",
        category="Aggregation",
        prompt="Count orders by status",
    ),
    QueryTemplate(
        id="agg-sum-avg",
        name="Sum and Average",
        description="Calculate totals and averages",
        category="Aggregation",
        prompt="Get total and average order amount per customer",
    ),
    QueryTemplate(
        id="agg-top-n",
        name="Top N Results",
        description="Get top performers",
        category="Aggregation",
        prompt="Get top 5 customers by total purchases",
    ),
    QueryTemplate(
        id="join-inner",
        name="Inner Join",
        description="Combine related tables",
        category="Joins",
        prompt="Get all orders with customer name and product details",
    ),
    QueryTemplate(
        id="join-left",
        name="Left Join with NULL check",
        description="Find records without matches",
        category="Joins",
        prompt="Find all customers who have never placed an order",
    ),
    QueryTemplate(
        id="date-range",
        name="Date Range Filter",
        description="Filter by date period",
        category="Date/Time",
        prompt="Get all orders from last 30 days",
    ),
    QueryTemplate(
        id="date-group",
        name="Group by Date Period",
        description="Aggregate by time period",
        category="Date/Time",
        prompt="Get monthly sales totals for this year",
    ),
    QueryTemplate(
        id="subquery-in",
        name="Subquery with IN",
        description="Filter using subquery results",
        category="Subqueries",
        prompt="Get products that have been ordered more than 10 times",
    ),
    QueryTemplate(
        id="subquery-exists",
        name="EXISTS Subquery",
        description="Check for existence",
        category="Subqueries",
        prompt="Find users who have at least one order over $100",
    ),
    QueryTemplate(
        id="analytics-running",
        name="Running Total",
        description="Calculate cumulative sum",
        category="Analytics",
        prompt="Calculate running total of sales by date",
    ),
    QueryTemplate(
        id="analytics-rank",
        name="Ranking",
        description="Rank records within groups",
        category="Analytics",
        prompt="Rank products by sales within each category",
    ),
]


def get_template_categories() -> list[str]:
    """Categories in first-seen order."""
    return list(dict.fromkeys(t.category for t in QUERY_TEMPLATES))


def get_templates(category: str | None = None) -> list[QueryTemplate]:
    if category is None:
        return list(QUERY_TEMPLATES)
    return [t for t in QUERY_TEMPLATES if t.category == category]
