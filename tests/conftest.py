import os

# Lambda ハンドラーはインポート時に boto3 リソースを生成するため、先に設定しておく
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-south-1")
os.environ.setdefault("TABLE_NAME", "tour-booking-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "tour-booking-test")
