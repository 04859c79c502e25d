# stockapi

A small JSON HTTP API for keeping track of products and the units they are
measured in. Data lives in a SQL database reached through SQLAlchemy; the
HTTP layer is Flask.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running the server

    stockapi

The command takes no options besides `--help`. It connects to PostgreSQL,
so a PostgreSQL driver that SQLAlchemy can use (such as `psycopg2`) has to
be installed alongside the package; it is not pulled in as a dependency.
If the database cannot be reached, the command logs the error and exits
with status 1.

Settings come from the environment:

| Variable      | Default     |
|---------------|-------------|
| `DB_HOST`     | `localhost` |
| `DB_PORT`     | `5432`      |
| `DB_USER`     | `postgres`  |
| `DB_PASSWORD` | `password`  |
| `DB_NAME`     | `testovik`  |
| `DB_SSLMODE`  | `disable`   |
| `SERVER_PORT` | `8080`      |

The server listens on all interfaces at `SERVER_PORT`.

## Endpoints

All answers are JSON. Errors come back as `{"error": "<message>"}`.

### Measures

- `GET /measures?limit=10&offset=0`: list measures, ordered by id.
  A non-positive or non-numeric `limit`, or a negative or non-numeric
  `offset`, gives 400.
- `GET /measures/<id>`: one measure; 400 for an id that is not a positive
  integer, 404 when there is none.
- `POST /measures`: create a measure from `{"name": "kg"}`; answers
  `{"id": ...}` with status 201, or 400 for a missing or empty name.
- `PUT /measures/<id>`: rename a measure; 404 when it does not exist.
- `DELETE /measures/<id>`: remove a measure; answers 204. Any failure,
  including a missing measure, answers 500.

### Products

- `GET /products?limit=10&offset=0`: list products, ordered by id.
- `GET /products/<id>`: one product, or 404.
- `POST /products`: create a product from
  `{"name": "Flour", "quantity": 5, "unit_cost": 1.5, "measure_id": 1}`;
  answers `{"id": ..., "message": "Product created successfully"}` with
  status 201. Rejected input answers 500 with the reason.
- `PUT /products/<id>`: replace a product's fields; 404 when it does not exist.
- `DELETE /products/<id>`: remove a product; answers 204, or 404.

Products need a non-empty name, a quantity of zero or more, a positive unit
cost and, on creation, a positive measure id. A body that is not a JSON
object, or whose fields have the wrong types, answers 400.

### Everything at once

- `GET /api/entities?type=product|measure&limit=10&offset=0`

With `type=GetAllEntity` the answer is `{"products": [...], "measures": [...]}`.
Any other type answers 500 with `unknown entity type: ...`.

## Using it from Python

```python
from sqlalchemy import create_engine, text

from stockapi.app import create_app
from stockapi.models import Measure
from stockapi.repository import UnifiedRepository

engine = create_engine("sqlite:///stock.db")
with engine.begin() as conn:
    conn.execute(text(
        "CREATE TABLE IF NOT EXISTS measures "
        "(id INTEGER PRIMARY KEY, name TEXT NOT NULL)"
    ))
    conn.execute(text(
        "CREATE TABLE IF NOT EXISTS products "
        "(id INTEGER PRIMARY KEY, name TEXT NOT NULL, quantity INTEGER NOT NULL, "
        "unit_cost REAL NOT NULL, measure_id INTEGER NOT NULL)"
    ))

repo = UnifiedRepository(engine)
measure_id = repo.create_measure(Measure(name="kg"))

flask_app = create_app(engine)
flask_app.run(port=8080)
```

The modules:

- `stockapi.config`: `DBConfig` with `connection_string()` and `url()`;
  `load()` builds one from the environment; `get_server_port()`.
- `stockapi.database`: `init_db(url)`, `get_db()` and `close_db()` keep one
  process-wide engine.
- `stockapi.models`: the `Measure` and `Product` dataclasses, with
  `to_dict()` and `from_dict()`.
- `stockapi.repository`: `ProductRepository`, `MeasureRepository` and
  `UnifiedRepository`; failures raise `RepositoryError`, missing records
  `NotFoundError`.
- `stockapi.services`: `MeasureService`, `ProductService` and
  `UniversalService`; rejected input raises `ValidationError`.
- `stockapi.handlers`: `measures_blueprint`, `products_blueprint` and
  `universal_blueprint` build Flask blueprints around a service.
- `stockapi.app`: `create_app(engine)`, `initialize(config)` (connects and
  returns an `App` whose `close()` releases the connection) and `main()`.

## What it does not do

The package does not create or migrate the database schema. The database
must already hold a `measures` table (`id`, `name`) and a `products` table
(`id`, `name`, `quantity`, `unit_cost`, `measure_id`), and must support
`RETURNING` clauses.