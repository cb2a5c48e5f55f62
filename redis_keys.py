ROOMS_HASH_KEY = "rooms" # hash - room name -> last member who entered
ROOM_MEMBERS_KEY = "{room_name}" # set of member user names, expires after the room's TTL

# **`rooms` hash**
# - field = room name, value = user name of the latest enter
# - never expires; a field can outlive its member set when the set's TTL runs out

# **Room member set**
# - `SADD {room_name} {user_name}` on enter, then `EXPIRE {room_name} {minutes * 60}`
# - deleted outright when the mentor removes the room
