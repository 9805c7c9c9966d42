"""Combinator laws and algebra documentation."""

# Combinators satisfy the following algebraic laws (== is item-for-item
# equality of the produced sequences):
#
# 1. Identity: s.transform_success(lambda v: v) == s
#    Mapping with identity changes nothing
#
# 2. Composition: s.transform_success(f).transform_success(g)
#                 == s.transform_success(lambda v: g(f(v)))
#    Chained maps fuse
#
# 3. Flatten is the left inverse of wrapping:
#    flatten_success([Ok(r) for r in s]) == s
#
# 4. Inspection is transparent: s.on_failure(f) == s and s.on_success(f) == s
#    for any f, side effects aside
#
# 5. Try-map is fallible transform: try_map_success is fallible_transform_success
#
# 6. Unwrap then map == transform_inner_or_else:
#    s.require_present_or_else(mk).transform_success(f)
#    == s.transform_inner_or_else(f, mk)
#
# 7. Filter-map never grows the success channel:
#    count(Ok in s.filter_map_success(f)) <= count(Ok in s)
