"""
Entry points for firehose-send-record

- send_record: GitHub Actions step (stream-name / data → Firehose → record-id)
"""
