"""
Production Line Dashboard

Analytics backend that turns the shared production spreadsheet (CSV
export of a Google Sheet) into daily and weekly manufacturing metrics:
production against target, QC pass, defect and repair counts.

To point at a different sheet:
    Set config.SHEET_URL to the sheet's share link. The sheet must be shared
    as "Anyone with the link can view".

To connect to Streamlit/Dash:
    Call dashboard.get_dashboard_view(records, config) to get a plain dict
    suitable for rendering cards and the production pie chart.

To track another product line:
    Add its name to config.TRACKED_PRODUCT_LINES. Matching against the
    sheet's item column is case-insensitive, exact first, then substring.
"""
