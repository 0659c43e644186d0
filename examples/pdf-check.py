#!/usr/bin/env python3
import sys
import logging

from pdfchecker import pdf


def main():
    if len(sys.argv) > 1:
        fnames = sys.argv[1:]
    else:
        fnames = ["pdf.pdf", "pdf-encrypted.pdf"]

    for fname in fnames:
        try:
            with open(fname, "rb") as fp:
                result = pdf.inspect(fp.read())
        except OSError as ex:
            print(f"Is {fname} protected? False")
            print(f"    cannot read file: {ex}")
            continue

        print(f"Is {fname} protected? {result.protected}")
        if not result.ok:
            print(f"    cannot read trailer: {result.error.kind}: {result.error}")


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    main()
