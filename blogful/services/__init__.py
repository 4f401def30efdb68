# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# database access for a single table:
#
#   article_service : list / get / insert / update / delete for Article
#   comment_service : list / get / insert / delete for Comment
#   user_service    : list / get / insert / delete for User
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.
