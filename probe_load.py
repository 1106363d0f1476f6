"""
probe_load.py — simple async load script against a Basic auth protected endpoint

Usage:
  python probe_load.py --base http://127.0.0.1:8000 --path /hello --user demo --password demo --count 5000 --concurrency 100

Pass --password with a wrong value to measure the rejection path instead.
"""
import argparse
import asyncio
import time
from datetime import datetime, timezone

import httpx

def _now_iso():
    return datetime.now(timezone.utc).isoformat()

async def _hit_one(client: httpx.AsyncClient, url: str):
    try:
        r = await client.get(url, timeout=10)
        return r.status_code
    except httpx.HTTPError:
        return None

async def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--base", default="http://127.0.0.1:8000")
    parser.add_argument("--path", default="/hello")
    parser.add_argument("--user", default="demo")
    parser.add_argument("--password", default="demo")
    parser.add_argument("--count", type=int, default=5000)
    parser.add_argument("--concurrency", type=int, default=100)
    args = parser.parse_args()

    url = f"{args.base}{args.path}"
    start_iso = _now_iso()
    t0 = time.perf_counter()
    ok = unauthorized = failed = 0

    limit = httpx.Limits(max_connections=args.concurrency, max_keepalive_connections=args.concurrency)
    auth = httpx.BasicAuth(args.user, args.password)
    async with httpx.AsyncClient(limits=limit, auth=auth) as client:
        sem = asyncio.Semaphore(args.concurrency)

        async def _task(i):
            nonlocal ok, unauthorized, failed
            async with sem:
                status = await _hit_one(client, url)
                if status is not None and 200 <= status < 300:
                    ok += 1
                elif status == 401:
                    unauthorized += 1
                else:
                    failed += 1

        await asyncio.gather(*(_task(i) for i in range(args.count)))

    dt = time.perf_counter() - t0
    end_iso = _now_iso()
    print(f"START: {start_iso}")
    print(f"END:   {end_iso}")
    print(f"TOTAL: {dt:.3f} s")
    print(f"OPS:   requests={args.count}, ok={ok}, unauthorized={unauthorized}, fail={failed}")
    if dt > 0:
        print(f"RPS:   {args.count/dt:.1f} req/s")

if __name__ == "__main__":
    asyncio.run(main())
