"""Lay out 100 random tag boxes around the canvas center and save a picture."""

import tag_cloud as tc
from tag_cloud.export.table_export import export_csv

WIDTH, HEIGHT = 800, 600

cloud = tc.CircularCloudLayouter(tc.Point(WIDTH // 2, HEIGHT // 2))
sizes = tc.generate_sizes(100, tc.Size(30, 30), tc.Size(50, 50), seed=42)
cloud.put_rectangles(sizes)

print(f"Placed {len(cloud)} rectangles, bounds {cloud.bounds()}")
print(f"Image: {tc.render_cloud(cloud, 'cloud.png', WIDTH, HEIGHT)}")
print(f"Table: {export_csv('cloud.csv', cloud)}")
