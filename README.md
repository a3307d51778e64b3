# vororacle

A command-line client for managing a running VOR randomness oracle daemon over
HTTP, together with the data models and analytics used to describe the
randomness requests such a daemon serves.

## Installation

```
pip install .
```

## The `oraclecli` command

`oraclecli` talks to the daemon's HTTP interface, sending the daemon's api key
as a `Bearer` token. The daemon's host, port and api key are kept in a JSON
settings file, by default `~/.oracle-cli_settings.json`; pass `-c`/`--conf` to
use another file. If the file does not exist, an empty one (`{}`) is created.

Configure the client first:

```
oraclecli settings
```

The menu shows the current host and port and offers:

- `1` set the oracle api key
- `2` set the oracle host address
- `3` set the oracle host port
- `0` exit

Each change is saved to the settings file straight away.

Other commands:

```
oraclecli                      # check that the daemon is alive
oraclecli about                # account, key hash, balances
oraclecli querywithdrawable    # withdrawable tokens, also shown in xFUND
oraclecli queryfees            # current fee; add a consumer address for its granular fee
oraclecli queryrequests --page=2 --limit=20 --status=3 --order=asc
oraclecli analytics 100        # statistics over the last 100 fulfilments
oraclecli analytics sim 200 --if-gas=150 --if-fees=0.1 --consumer=0x...
oraclecli analytics consumers  # statistics grouped by consumer contract
oraclecli gettx 0xabc...       # transaction details and receipt
oraclecli changefee
oraclecli changegranularfee
oraclecli register
oraclecli withdraw
oraclecli stop
oraclecli version
```

`queryrequests` defaults to page 1, 10 results, order `desc` and status `-1`
(no filter). Status values: 0 unknown, 1 initialised, 2 fulfil tx sent,
3 tx failed, 4 succeeded, 5 fulfilment failed.

The `analytics` commands first look up the current xFUND price in ETH and USD
from a public price service; if that fails, zero prices are used. The number to
analyse must be greater than zero, and `sim` needs non-zero `--if-gas` (Gwei)
and `--if-fees` (xFUND) values.

`changefee`, `changegranularfee`, `register` and `withdraw` ask for their values
interactively and repeat a question until the answer is acceptable: fees and
amounts must be non-zero 64-bit integers, and a consumer contract address must
be `0x` followed by 40 hex digits.

## Library use

- `vororacle.client.OracleClient` wraps every daemon endpoint; connection
  failures raise `OracleClientError`. `fetch_xfund_price` returns an
  `XfundPrice`.
- `vororacle.settings_store.SettingsStore` loads and saves the client settings
  (`CliSettings` from `vororacle.cli_models`) and builds the daemon's base
  address with `oracle_address()`.
- `vororacle.prompts` holds the interactive questions; each takes an `ask`
  callable, `input` by default.
- `vororacle.tokens.convert_to_xfund` converts a raw token amount (9 decimals)
  to xFUND, giving 0 for anything that is not an integer.
- `vororacle.config.load_config` reads a daemon configuration file into a
  `Config`; `default_config()` gives the built-in defaults.
- `vororacle.records` defines `RandomnessRequest`, `RequestStatus`,
  `BlocksStored`, `FailedFulfilment` and `LogRandomnessRequest`.
- `vororacle.keystore_model` defines the serialised key storage file
  (`KeyStorageModel`, `KeyStorageKey`); decrypted keys and tokens are never
  written by `to_dict()`.
- `vororacle.analytics.process` turns `RandomnessRequest` records into gas,
  gas price, cost and earnings statistics; `analyse` and `consumers_report`
  build the full responses defined in `vororacle.api_models`.
- `vororacle.requests_view.build_request_response` builds one paginated page of
  request records.
- `vororacle.version.new_info()` returns the tool's `VersionInfo`.

## What this package does not do

It does not include the oracle daemon itself: there is no HTTP server, no
blockchain listener or contract calls, no key storage encryption and no
request database here. `oraclecli` only works against a daemon that is already
running, and the analytics and request-view functions work on records you
supply.

## Tests

```
pip install .[test]
pytest
```