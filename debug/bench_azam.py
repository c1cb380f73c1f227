#!/usr/bin/env python3
"""Quick encode/decode benchmark - direct timing only"""
import os
import time


ITERATIONS = 1000
PAYLOAD = os.urandom(4096)
INTS = list(range(0, 1 << 32, (1 << 32) // 1000))


def bench(label, fn, arg):
    start = time.perf_counter()
    for _ in range(ITERATIONS):
        result = fn(arg)
    elapsed = time.perf_counter() - start
    print(f"{label}")
    print(f"  Time: {elapsed:.3f}s ({elapsed / ITERATIONS * 1000:.3f} ms/op)")
    return result


def main():
    import azamcodec

    print(f"Benchmarking azamcodec ({ITERATIONS} iterations)...")
    print(f"Payload: {len(PAYLOAD)} bytes, {len(INTS)} ints\n")

    encoded = bench("encode_bytes", azamcodec.encode_bytes, PAYLOAD)
    bench("decode_bytes", azamcodec.decode_bytes, encoded)
    encoded_ints = bench("encode_ints", azamcodec.encode_ints, INTS)
    bench("decode_ints", azamcodec.decode_ints, encoded_ints)
    print(f"  Output sample: {encoded_ints[:60]}...")

    print("\n✅ benchmark complete")


if __name__ == '__main__':
    main()
