from PersistentList import cons, nil

# Three lists sharing the one-element tail p1.
p0 = nil
p1 = cons(1, p0)
p2 = cons(2, p1)
p2a = cons(2, p1)
p2b = cons(3, p1)

print("Comparisons:\n%s, %s" % (p2 == p2a, p2 == p2b))
for i in p2b:
    print(i)

# p2b is untouched by the reversal.
for i in p2b.reverse():
    print(i)
