"""Build a few strings with chained buffer calls."""

from textbuffer import create, local, shared

print(create(8).append("aaa").append(20).append("bbbb").to_text())
print(create(8).append("  hi  ").trim().to_upper().to_text())

# Reused buffer, fine in single-threaded code
for i in range(3):
    print(shared().append("row ").append(i).append(": ").append(i * 1.5).to_text())

# Per-thread reuse
print(local().append(["o", "k"]).to_text())
