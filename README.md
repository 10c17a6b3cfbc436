# nsoneapi

Service objects for a managed DNS REST API. Each service wraps one group of
endpoints, builds the request paths, checks required fields and turns the
API's known failures into specific Python exceptions.

## Services

| Module | Class | Endpoints |
| --- | --- | --- |
| `nsoneapi.zone` | `ZonesService` | `zones`, `zones/ZONE` (with optional pagination) |
| `nsoneapi.record` | `RecordsService` | `zones/ZONE/DOMAIN/TYPE` |
| `nsoneapi.tsig_key` | `TsigService` | `tsig`, `tsig/NAME` |
| `nsoneapi.pulsar_job` | `PulsarJobsService` | `pulsar/apps/APP/jobs[/JOB]` |
| `nsoneapi.stat` | `StatsService` | `stats/qps[/ZONE[/RECORD/TYPE]]` |
| `nsoneapi.reservation` | `ReservationService` | `dhcp/reservation[/ID]` |
| `nsoneapi.scope` | `ScopeService` | `dhcp/scope[/ID]` |
| `nsoneapi.scopegroup` | `ScopeGroupService` | `dhcp/scopegroup[/ID]` |

Resources are plain dicts. Most methods return a tuple of the decoded data
and the response object; `create`, `update` and `delete` on zones, records,
TSIG keys and Pulsar jobs return only the response, and `create`/`update`
refresh the given dict in place from the API's answer. The DHCP `edit`
methods also refresh the given dict and return it with the response.

```python
from nsoneapi.zone import ZonesService
from nsoneapi.errors import ZoneMissingError

zones = ZonesService(client)
try:
    zone, response = zones.get("example.com")
except ZoneMissingError:
    ...
```

## The client you supply

This package does not send HTTP requests itself: it has no HTTP client, no
authentication and no endpoint configuration. Every service is built from a
client object you provide, which must offer:

- `do(method, path, body=None)` returning `(data, response)`, and raising
  `nsoneapi.errors.APIError` (with the server's message and the response)
  for error responses;
- for `ZonesService` also a `follow_pagination` flag,
  `do_with_pagination(method, path, next_page)` and `get_uri(uri)`, each
  returning `(data, response)`.

When `follow_pagination` is true, `ZonesService.list` appends later pages of
zones and `ZonesService.get` appends later pages of the zone's `records`.

## Errors

All exceptions derive from `nsoneapi.errors.NS1Error`, which carries
`message`, `response` and `status_code`. The services replace an `APIError`
from the client with a more specific subclass when they recognise it:

| Service | Condition | Exception |
| --- | --- | --- |
| zones | message `zone not found` | `ZoneMissingError` |
| zones (create) | message `zone already exists` | `ZoneExistsError` |
| records | message `record not found` | `RecordMissingError` |
| records (create, update) | message `zone not found` / `record already exists` | `ZoneMissingError` / `RecordExistsError` |
| TSIG keys | status 404 | `TsigKeyMissingError` |
| TSIG keys (create) | status 409 | `TsigKeyExistsError` |
| Pulsar jobs (list, create) | status 404 | `AppMissingError` |
| Pulsar jobs (get, update, delete) | message `pulsar app not found` / `pulsar job JOB not found for appid APP` | `AppMissingError` / `JobMissingError` |
| stats | message `zone not found` / `record not found` | `ZoneMissingError` / `RecordMissingError` |

Anything else is re-raised unchanged.

The DHCP services check required fields before sending and raise
`ValueError` when one is missing: `options` for reservation `create`,
`id` and `options` for reservation `edit`, `address_id` for scope `create`
and `edit`, a non-empty `name` for scope group `create` and `id` for scope
group `edit`.

## Request decorators

A *doer* is any callable that takes a `urllib.request.Request` and returns a
response. `nsoneapi.util.decorate(doer, *decorators)` wraps it in each
decorator in turn, the last one outermost. `nsoneapi.util.log_requests(logger)`
returns a decorator that logs each request's user agent, method and URL at
INFO level before passing it on.

## Development

```
pip install -e .[test]
pytest
```