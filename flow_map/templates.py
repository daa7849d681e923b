# CSS/HTML/JS templates for the static page
BASE_CSS = r"""
:root{--bg:#0b0b0b;--fg:#f5f5f5;--muted:#a5a5a5;--accent:#66b3ff;--card:#141414;--border:#2a2a2a}
*{box-sizing:border-box}
html,body{margin:0;padding:0;background:var(--bg);color:var(--fg);font:16px/1.5 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial}
a{color:var(--accent);text-decoration:none} a:hover{text-decoration:underline}
.container{max-width:1100px;margin:0 auto;padding:16px}
.header{display:flex;flex-wrap:wrap;align-items:center;gap:12px;margin-bottom:16px}
.header h1{font-size:1.25rem;margin:0}
.card{background:var(--card);border:1px solid var(--border);border-radius:12px;padding:16px;margin-bottom:16px}
.small-links{display:flex;flex-wrap:wrap;gap:8px}
.btn{display:inline-block;padding:10px 14px;background:#1e1e1e;border:1px solid var(--border);border-radius:10px}
footer{margin-top:24px;color:var(--muted);font-size:.9rem}
img.plot{width:100%;max-width:900px;display:block;margin:0 auto;border:1px solid var(--border);border-radius:10px;background:#000}
.legend{color:var(--muted);font-size:.95rem}
.center{text-align:center}
.site-header{position:sticky;top:0;z-index:1100;background:linear-gradient(180deg, rgba(11,11,11,0.98), rgba(11,11,11,0.95));backdrop-filter:blur(4px);margin-bottom:12px;border-radius:10px}
.card.site-header{padding:8px}
/* Map */
#map{width:100%;height:auto;background:#000;border-radius:10px}
#map path.region{cursor:pointer}
#map .arrow{fill:none;pointer-events:none}
.tooltip{position:absolute;visibility:hidden;pointer-events:none;background:rgba(0,0,0,0.85);color:var(--fg);border:1px solid var(--border);border-radius:8px;padding:6px 10px;font-size:.9rem;z-index:2000}
.arrow-key{display:flex;gap:16px;justify-content:center;flex-wrap:wrap;margin-top:8px}
.arrow-key .swatch{display:inline-block;width:28px;height:4px;border-radius:2px;vertical-align:middle;margin-right:6px}
"""

INDEX_HTML = r"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>%TITLE%</title>
<link rel="stylesheet" href="styles.css" />
</head>
<body>
<div class="container">
  %HEADER%
  <div class="header">
    <h1>%TITLE%</h1>
    <span class="legend">Hover a state for its numbers</span>
  </div>
  <div class="card center">
    <img class="plot" alt="%HUB% population by year" src="%POPULATION_SRC%">
    <div class="legend" style="margin-top:8px">%HUB% population by year</div>
  </div>
  <div class="card center">
    %MAP%
    %ARROW_KEY%
  </div>
  <footer>%FOOTER%</footer>
</div>
<div id="tooltip" class="tooltip"></div>
<script>
%MAP_JS%
</script>
</body>
</html>
"""

MAP_UNAVAILABLE_HTML = (
    '<div class="legend" style="padding:24px">Map data could not be loaded; the migration map was not built.</div>'
)

MARKER_SVG = (
    '<marker id="%ID%" viewBox="0 0 10 10" refX="5" refY="5" markerWidth="6" markerHeight="6" orient="auto">'
    '<path d="M 0 0 L 10 5 L 0 10 Z" fill="%FILL%"/></marker>'
)

# Mirrors flow_map.tooltips: show at pointer + offset, follow the pointer, hide on out.
MAP_JS = r"""
(function(){
  const OFFSET_X = %OFFSET_X%, OFFSET_Y = %OFFSET_Y%;
  const HOVER_FILL = "%HOVER_FILL%";
  const tooltip = document.getElementById("tooltip");
  function place(event){
    tooltip.style.left = (event.pageX + OFFSET_X) + "px";
    tooltip.style.top = (event.pageY + OFFSET_Y) + "px";
  }
  document.querySelectorAll("#map path.region").forEach(function(el){
    el.addEventListener("mouseover", function(event){
      el.setAttribute("fill", HOVER_FILL);
      tooltip.innerHTML = el.getAttribute("data-tooltip");
      place(event);
      tooltip.style.visibility = "visible";
    });
    el.addEventListener("mousemove", place);
    el.addEventListener("mouseout", function(){
      el.setAttribute("fill", el.getAttribute("data-fill"));
      tooltip.style.visibility = "hidden";
    });
  });
})();
"""
