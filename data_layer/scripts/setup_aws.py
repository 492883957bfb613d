"""AWS altyapısını kurar ve örnek veriyi yükler.

Kullanım:
    python -m data_layer.scripts.setup_aws              # Kur ve yükle
    python -m data_layer.scripts.setup_aws --delete     # Her şeyi sil
    python -m data_layer.scripts.setup_aws --region eu-west-1  # Farklı region
"""
import logging
import os

import env_loader  # noqa: F401
import boto3

from data_layer.generators.sample_data import initialize_sample_data
from data_layer.infrastructure.dynamodb_setup import create_tables, delete_tables
from data_layer.infrastructure.s3_setup import create_bucket, delete_bucket


def main(argv=None):
    import sys

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")

    region = os.environ.get("AWS_DEFAULT_REGION", "us-west-2")
    delete_mode = False

    # Argümanları parse et
    args = sys.argv[1:] if argv is None else argv
    for i, arg in enumerate(args):
        if arg == "--delete":
            delete_mode = True
        elif arg == "--region" and i + 1 < len(args):
            region = args[i + 1]

    if delete_mode:
        print("🗑️  AWS kaynakları siliniyor...\n")
        delete_tables(region)
        delete_bucket(region)
        print("\n✅ Tüm kaynaklar silindi!")
        return

    print("=" * 60)
    print("🚀 AWS Altyapı Kurulumu - Tedarik Zinciri Dashboard")
    print(f"   Region: {region}")
    print("=" * 60)

    print("\n📊 ADIM 1: DynamoDB Tabloları")
    print("-" * 40)
    create_tables(region)

    print("\n📦 ADIM 2: S3 Log Bucket")
    print("-" * 40)
    bucket = create_bucket(region)

    print("\n📤 ADIM 3: Örnek Veri")
    print("-" * 40)
    result = initialize_sample_data(boto3.resource("dynamodb", region_name=region))
    print(f"  {result['message']}")

    print("\n" + "=" * 60)
    print("✅ AWS altyapısı hazır!")
    print(f"   S3: {bucket}")
    print("=" * 60)


if __name__ == "__main__":
    main()
