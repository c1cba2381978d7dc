"""
recordui Kernel — Page Templates

Mustache (chevron) page shells for the three presentation modes.
`{{name}}` is HTML-escaped by chevron; `{{{name}}}` is only used for
fragments the renderer has already escaped or encoded itself.
"""

from __future__ import annotations

BASE_CSS = """
*, *::before, *::after { box-sizing: border-box; }
body {
  margin: 0;
  font-family: ui-sans-serif, system-ui, -apple-system, "Segoe UI", sans-serif;
  background: #f9f9fb;
  color: #111;
}
.wrap { max-width: 720px; margin: 0 auto; padding: 16px; }
.card {
  background: #fff;
  border-radius: 16px;
  box-shadow: 0 8px 24px rgba(0,0,0,.07);
  overflow: hidden;
}
.header {
  display: flex;
  align-items: center;
  justify-content: space-between;
  gap: 12px;
  padding: 16px 20px;
  border-bottom: 1px solid #eee;
}
.header h1 { margin: 0; font-size: 18px; font-weight: 600; color: #111; }
.body { padding: 20px; }
.btn {
  padding: 10px 16px;
  border: 0;
  border-radius: 999px;
  font-weight: 500;
  font-size: 14px;
  cursor: pointer;
}
.btn:disabled { opacity: .5; cursor: default; }
.btn.primary { background: #111; color: #fff; }
.btn.cancel, .btn.edit { background: #e5e7eb; color: #111; }
.sr-only {
  position: absolute; width: 1px; height: 1px; overflow: hidden;
  clip: rect(0 0 0 0); white-space: nowrap;
}
"""

FORM_CSS = """
.field { margin-bottom: 16px; position: relative; }
.field label { display: block; font-size: 14px; font-weight: 500; color: #374151; margin-bottom: 4px; }
.input-wrapper { position: relative; }
.field input[type=text], .field input[type=date] {
  width: 100%;
  padding: 10px 12px;
  border: 1px solid #d1d5db;
  border-radius: 8px;
  font-size: 15px;
  background: #fff;
  color: #111;
}
.field input:focus { border-color: #111; outline: none; }
.field input[readonly] { background: #f3f4f6; color: #6b7280; }
.suffix-field input { padding-right: 32px; }
.input-suffix {
  position: absolute; right: 12px; top: 50%; transform: translateY(-50%);
  color: #6b7280; font-size: 14px; pointer-events: none;
}
.actions {
  display: flex;
  justify-content: flex-end;
  gap: 10px;
  padding: 16px 20px;
  border-top: 1px solid #eee;
}
"""

TABLE_CSS = """
.wrap { max-width: 1080px; }
.count { font-size: 13px; color: #6b7280; }
.table-scroll { overflow-x: auto; }
table.records { width: 100%; border-collapse: collapse; font-size: 14px; }
table.records th {
  text-align: left; font-weight: 600; color: #374151;
  padding: 10px 12px; border-bottom: 1px solid #e5e7eb; white-space: nowrap;
}
table.records td { padding: 10px 12px; border-bottom: 1px solid #f3f4f6; vertical-align: top; }
tr.record-row { cursor: pointer; }
tr.record-row:hover { background: #f9fafb; }
.cell-currency, .cell-percentage { text-align: right; font-variant-numeric: tabular-nums; }
.cell-identifier { color: #6b7280; font-family: ui-monospace, monospace; font-size: 12px; }
.col-actions { width: 1%; text-align: right; }
.btn.edit { padding: 6px 12px; font-size: 13px; }
.records-empty { padding: 32px 20px; margin: 0; color: #6b7280; font-style: italic; text-align: center; }
"""

DETAIL_CSS = """
.eyebrow { margin: 0 0 2px; font-size: 12px; letter-spacing: .04em; text-transform: uppercase; color: #6b7280; }
.detail-section + .detail-section { margin-top: 20px; }
.detail-section h2 {
  margin: 0 0 8px; font-size: 13px; font-weight: 600; color: #374151;
  text-transform: uppercase; letter-spacing: .04em;
}
.detail-section dl { margin: 0; display: grid; grid-template-columns: minmax(120px, 1fr) 2fr; gap: 6px 16px; }
.detail-field { display: contents; }
.detail-section dt { font-size: 14px; color: #6b7280; }
.detail-section dd { margin: 0; font-size: 14px; color: #111; overflow-wrap: anywhere; }
.detail-section a { color: #1d4ed8; text-decoration: none; }
.detail-section a:hover { text-decoration: underline; }
.empty { color: #9ca3af; }
"""

DATA_BLOCKS_TEMPLATE = """\
  <script type="application/json" id="recordui-config">{{{config_json}}}</script>
{{#has_original}}
  <script type="application/json" id="recordui-original">{{{original_json}}}</script>
{{/has_original}}
{{#has_bridge}}
  <script>
{{{bridge_js}}}
  </script>
{{/has_bridge}}
"""

EDIT_FORM_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Edit {{title}}</title>
  <style>
{{{css}}}
  </style>
</head>
<body data-mode="form" data-state="idle">
  <div class="wrap">
    <div class="card">
      <div class="header"><h1>Edit {{title}}</h1></div>
      <div class="body">
{{#fields}}
        <div class="field{{#has_suffix}} suffix-field{{/has_suffix}}" data-label="{{label}}" data-kind="{{kind}}" data-suffix="{{suffix}}">
          <label for="{{input_id}}">{{label}}</label>
          <div class="input-wrapper">
            <input type="{{input_type}}" id="{{input_id}}" name="{{label}}" value="{{edit_value}}"{{#readonly}} readonly{{/readonly}}>
{{#has_suffix}}
            <span class="input-suffix">{{suffix}}</span>
{{/has_suffix}}
          </div>
        </div>
{{/fields}}
      </div>
      <div class="actions">
        <button type="button" class="btn cancel" data-action="cancel">Cancel</button>
        <button type="button" class="btn primary" data-action="save">Save</button>
      </div>
    </div>
  </div>
{{{data_blocks}}}
</body>
</html>
"""

RECORDS_TABLE_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{object_type}} records</title>
  <style>
{{{css}}}
  </style>
</head>
<body data-mode="table" data-state="idle">
  <div class="wrap">
    <div class="card">
      <div class="header"><h1>{{object_type}}</h1><span class="count">{{count_label}}</span></div>
{{#has_records}}
      <div class="table-scroll">
        <table class="records">
          <thead>
            <tr>
{{#columns}}
              <th scope="col">{{label}}</th>
{{/columns}}
              <th scope="col" class="col-actions"><span class="sr-only">Actions</span></th>
            </tr>
          </thead>
          <tbody>
{{#rows}}
            <tr class="record-row" data-record-id="{{record_id}}" data-record="{{record_json}}" title="Click to edit">
{{#cells}}
              <td class="cell cell-{{kind}}">{{value}}</td>
{{/cells}}
              <td class="col-actions"><button type="button" class="btn edit" data-action="edit">Edit</button></td>
            </tr>
{{/rows}}
          </tbody>
        </table>
      </div>
{{/has_records}}
{{^has_records}}
      <p class="records-empty">{{empty_message}}</p>
{{/has_records}}
    </div>
  </div>
{{{data_blocks}}}
</body>
</html>
"""

DETAIL_CARD_TEMPLATE = """\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{title}}</title>
  <style>
{{{css}}}
  </style>
</head>
<body data-mode="detail" data-state="idle">
  <div class="wrap">
    <article class="card detail-card" data-record-id="{{record_id}}">
      <div class="header">
        <div>
{{#has_object_type}}
          <p class="eyebrow">{{object_type}}</p>
{{/has_object_type}}
          <h1>{{title}}</h1>
        </div>
        <button type="button" class="btn edit" data-action="edit">Edit</button>
      </div>
      <div class="body">
{{#sections}}
        <section class="detail-section">
          <h2>{{header}}</h2>
          <dl>
{{#fields}}
            <div class="detail-field detail-{{kind}}"><dt>{{label}}</dt><dd>{{{value_html}}}</dd></div>
{{/fields}}
          </dl>
        </section>
{{/sections}}
      </div>
    </article>
  </div>
{{{data_blocks}}}
</body>
</html>
"""
