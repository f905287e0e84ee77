# telemkit

Building blocks for streaming network telemetry. It provides typed values,
subscription messages, per-subscription statistics and an interface for file
watchers.

## Install

```
pip install telemkit
pip install "telemkit[test]"   # with the test tools
```

## Typed values

`telemkit.value` converts between Python scalars and `TypedValue`. A
`TypedValue` holds a `kind` (a `ValueKind`) and a `value`.

```python
from telemkit.value import from_scalar, to_scalar, equal

tv = from_scalar(500)                 # TypedValue(ValueKind.INT, 500)
assert to_scalar(tv) == 500
assert equal(from_scalar("foo"), from_scalar("foo"))

to_scalar(from_scalar(["a", 1]))      # ["a", 1]
```

`from_scalar` accepts these types:

- `str`
- `bool`
- `int`: values in the signed 64-bit range become `INT`, and larger values up to the unsigned 64-bit limit become `UINT`
- `float`, which becomes `DOUBLE`
- `bytes` and `bytearray`
- lists and tuples of any of the above, which become a `LEAFLIST` holding a `ScalarArray`

It raises `ScalarError` (a `ValueError`) in these cases:

- any other type
- integers outside the 64-bit range
- strings that cannot be encoded as UTF-8

`to_scalar` converts values by kind:

- It turns a `Decimal64` into a single-precision float.
- It decodes `JSON` and `JSON_IETF` payloads and wraps them in a `DeprecatedScalar`. JSON numbers become floats.
- It raises `ScalarError` for every other non-scalar kind: `ANY`, `ASCII` and `PROTO_BYTES`. It also raises `ScalarError` for an empty value.

`equal` compares only primitive values, decimals and leaf-lists. It returns
`False` for every other kind, for values of different kinds, and for `None`.

## Subscription messages

`telemkit.messages` defines the messages as dataclasses:

- `Path` and `PathElem`
- `Notification` and `Update`
- `Subscription` and `SubscriptionList`, with a `SubscriptionMode` of `STREAM`, `ONCE` or `POLL`
- `SubscribeRequest` and `PollRequest`
- `SubscribeResponse`

`Path.to_strings(include_target)` flattens a path into a list of strings. Each
element's keys follow its name, sorted by key name. It falls back to the plain
`element` list when `elem` is empty. `SubscribeResponse.sync()` builds the sync
marker.

```python
from telemkit.messages import (
    Notification, Path, PathElem, Update, make_subscribe_response, is_target_delete,
)

n = Notification(prefix=Path(target="dev1"), update=[Update(path=Path(elem=[PathElem("a")]))])
resp = make_subscribe_response(n, dup=3, report_duplicates=True)
# resp.update.update[0].duplicates == 3; n itself is left unchanged

is_target_delete(Notification(prefix=Path(target="dev1"),
                              delete=[Path(elem=[PathElem("*")])]))   # True
```

`make_subscribe_response` raises `MessageError` if it is not given a
`Notification`. `is_target_delete` returns `True` only when all of these hold:

- the notification has exactly one delete
- there is no origin
- the prefix and delete path together are just `*`

## Statistics

`telemkit.stats.Stats` is a thread-safe registry of three kinds of counters:

- per subscription mode (`TypeStats`)
- per target (`TargetStats`)
- per client (`ClientStats`)

`type_stats`, `target_stats` and `client_stats` return the live record and
create it on first use. `all_type_stats`, `all_target_stats` and
`all_client_stats` return snapshot copies. `remove_client_stats` drops a
client's record.

```python
from telemkit.stats import Stats

stats = Stats()
stats.type_stats("stream").subscription_count += 1
stats.all_type_stats()        # {"stream": TypeStats(active_subscription_count=0, subscription_count=1)}
```

## Watching files

`telemkit.watch.Watcher` is an abstract interface for file watchers:

- `read(timeout)` returns the next `Update`, which holds a path, its contents and any error.
- `add(path)` and `remove(path)` change what is watched.
- `close()` stops watching.

A `Watcher` can be used as a context manager, which closes it on exit.

## What this package does not do

The package has no Subscribe server, data cache, update matching, network
transport or command-line program. It defines the messages and helpers that
such a server would use, but it does not serve or send them. It also has no
concrete `Watcher`: you subclass the interface to watch a particular
filesystem.